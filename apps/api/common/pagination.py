# apps/api/common/pagination.py
"""
page / limit 쿼리 기반 페이지네이션

GET ...?page=2&limit=10
→ {"results": [...], "pagination": {"page": 2, "limit": 10, "total": 35, "pages": 4}}

- 숫자가 아니거나 1 미만이면 기본값 (page=1, limit=10)
- limit 상한 100
- 범위를 벗어난 page 는 오류 대신 빈 목록
"""
from __future__ import annotations

import math
from collections import OrderedDict

from rest_framework.pagination import BasePagination
from rest_framework.response import Response


def _positive_int(raw, default: int) -> int:
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError):
        return default
    return value if value > 0 else default


class PageLimitPagination(BasePagination):
    page_query_param = "page"
    limit_query_param = "limit"
    default_limit = 10
    max_limit = 100

    def get_page_params(self, request):
        page = _positive_int(request.query_params.get(self.page_query_param), 1)
        limit = _positive_int(request.query_params.get(self.limit_query_param), self.default_limit)
        return page, min(limit, self.max_limit)

    def paginate_queryset(self, queryset, request, view=None):
        self.page, self.limit = self.get_page_params(request)
        try:
            self.total = queryset.count()
        except (AttributeError, TypeError):
            # list 등 QuerySet 이 아닌 경우
            self.total = len(queryset)
        self.offset = (self.page - 1) * self.limit
        return list(queryset[self.offset:self.offset + self.limit])

    def get_pagination_meta(self) -> dict:
        return OrderedDict(
            [
                ("page", self.page),
                ("limit", self.limit),
                ("total", self.total),
                ("pages", math.ceil(self.total / self.limit) if self.total else 0),
            ]
        )

    def get_paginated_response(self, data):
        return Response(
            OrderedDict(
                [
                    ("results", data),
                    ("pagination", self.get_pagination_meta()),
                ]
            )
        )

    def get_paginated_response_schema(self, schema):
        return {
            "type": "object",
            "properties": {
                "results": schema,
                "pagination": {
                    "type": "object",
                    "properties": {
                        "page": {"type": "integer"},
                        "limit": {"type": "integer"},
                        "total": {"type": "integer"},
                        "pages": {"type": "integer"},
                    },
                },
            },
        }
