"""
Django Unit of Work — transaction.atomic 래퍼 (lazy import)
"""
from __future__ import annotations


class DjangoUnitOfWork:
    """Django transaction.atomic으로 트랜잭션 경계. 메서드 내부에서 Django import."""

    def __init__(self) -> None:
        self._atomic = None
        self._quizzes = None
        self._results = None

    @property
    def quizzes(self):
        from academy.adapters.db.django.repositories_quizzes import DjangoQuizRepository
        if self._quizzes is None:
            self._quizzes = DjangoQuizRepository()
        return self._quizzes

    @property
    def results(self):
        from academy.adapters.db.django.repositories_results import DjangoResultRepository
        if self._results is None:
            self._results = DjangoResultRepository()
        return self._results

    def __enter__(self) -> DjangoUnitOfWork:
        from django.db import transaction
        self._atomic = transaction.atomic()
        self._atomic.__enter__()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        # 예외가 있으면 atomic 이 rollback, 없으면 commit
        if self._atomic is not None:
            atomic, self._atomic = self._atomic, None
            atomic.__exit__(exc_type, exc_val, exc_tb)
