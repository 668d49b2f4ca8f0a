from academy.application.ports.unit_of_work import UnitOfWork
from academy.application.ports.repositories import QuizRepository, ResultRepository

__all__ = [
    "UnitOfWork",
    "QuizRepository",
    "ResultRepository",
]
