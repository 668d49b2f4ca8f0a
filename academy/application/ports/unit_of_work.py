"""
Unit of Work 포트 — 트랜잭션 경계 (Django 미사용)
"""
from __future__ import annotations

from typing import Protocol

from academy.application.ports.repositories import QuizRepository, ResultRepository


class UnitOfWork(Protocol):
    """트랜잭션 단위. __enter__에서 시작, __exit__에서 commit (예외 시 rollback). 수동 commit/rollback 없음."""

    @property
    def quizzes(self) -> QuizRepository:
        ...

    @property
    def results(self) -> ResultRepository:
        ...

    def __enter__(self) -> "UnitOfWork":
        ...

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        ...
