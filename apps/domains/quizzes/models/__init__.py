# apps/domains/quizzes/models/__init__.py
from .quiz import Quiz
from .question import Question

__all__ = [
    "Quiz",
    "Question",
]
