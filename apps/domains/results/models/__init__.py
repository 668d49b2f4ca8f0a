# apps/domains/results/models/__init__.py

from .quiz_result import QuizResult

__all__ = [
    "QuizResult",
]
