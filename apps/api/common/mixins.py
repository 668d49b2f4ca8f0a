# apps/api/common/mixins.py
from __future__ import annotations

from academy.domain.shared.errors import NotFoundError
from academy.domain.shared.ids import parse_id


class ParsedLookupMixin:
    """
    라우터 pk 를 ORM 에 넘기기 전에 양의 정수로 검증.

    - 숫자가 아니면 InvalidId (400, INVALID_ID) — ORM ValueError 로 500 이 나지 않게
    - 없으면 not_found_error (도메인별 *_NOT_FOUND)
    """

    not_found_error = NotFoundError

    def get_object(self):
        lookup_url_kwarg = self.lookup_url_kwarg or self.lookup_field
        pk = parse_id(self.kwargs[lookup_url_kwarg])

        obj = self.get_queryset().filter(**{self.lookup_field: pk}).first()
        if obj is None:
            raise self.not_found_error()

        self.check_object_permissions(self.request, obj)
        return obj
