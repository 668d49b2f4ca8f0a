# PATH: apps/core/management/commands/seed_demo.py
"""
로컬 개발용 데모 데이터 채우기 (여러 번 실행해도 안전).

- admin / admin123 (admin)
- john_student, jane_student, bob_student / student123 (student)
- 레슨 4개 + 레슨별 퀴즈 1개 (문항 포함)
- 샘플 피드백

이미 있는 행은 건너뛴다. 비밀번호는 --reset-passwords 일 때만 다시 맞춘다.

사용:
  python manage.py seed_demo
  python manage.py seed_demo --reset-passwords
"""
from django.core.management.base import BaseCommand
from django.db import transaction

from academy.adapters.db.django import repositories_core as core_repo
from academy.adapters.db.django.uow import DjangoUnitOfWork
from academy.application.use_cases.quizzes.save_quiz import create_quiz
from academy.domain.quizzes.entities import QuestionDraft, QuizDraft
from apps.core.models import User
from apps.domains.lessons.models import Lesson


ADMIN_PASSWORD = "admin123"
STUDENT_PASSWORD = "student123"

USERS = [
    ("admin", "admin@example.com", User.Role.ADMIN, ADMIN_PASSWORD),
    ("john_student", "john@example.com", User.Role.STUDENT, STUDENT_PASSWORD),
    ("jane_student", "jane@example.com", User.Role.STUDENT, STUDENT_PASSWORD),
    ("bob_student", "bob@example.com", User.Role.STUDENT, STUDENT_PASSWORD),
]

LESSONS = [
    {
        "title": "Introduction to JavaScript",
        "description": "Learn the fundamentals of JavaScript programming",
        "content": (
            "JavaScript is a versatile programming language used for web development. "
            "This lesson covers variables, data types, functions, and control structures."
        ),
        "video_url": "https://www.youtube.com/embed/W6NZfCO5SIk",
        "level": Lesson.Level.BEGINNER,
        "quiz": {
            "title": "JavaScript Basics Quiz",
            "description": "Test your knowledge of JavaScript fundamentals",
            "questions": [
                ("Which of the following is the correct way to declare a variable in JavaScript?",
                 ["var name;", "variable name;", "v name;", "declare name;"], 0, 1),
                ("What is the result of typeof null in JavaScript?",
                 ["null", "undefined", "object", "boolean"], 2, 2),
                ("Which method is used to add an element to the end of an array?",
                 ["push()", "pop()", "shift()", "unshift()"], 0, 1),
            ],
        },
    },
    {
        "title": "HTML Fundamentals",
        "description": "Master the building blocks of web pages",
        "content": (
            "HTML is the standard markup language for creating web pages. "
            "This lesson covers elements, attributes, semantic markup and forms."
        ),
        "video_url": "https://www.youtube.com/embed/UB1O30fR-EE",
        "level": Lesson.Level.BEGINNER,
        "quiz": {
            "title": "HTML Knowledge Check",
            "description": "Assess your understanding of HTML structure and elements",
            "questions": [
                ("Which HTML element is used for the largest heading?",
                 ["<h6>", "<h1>", "<heading>", "<header>"], 1, 1),
                ("What does the <a> tag represent in HTML?",
                 ["Article", "Anchor/Link", "Audio", "Aside"], 1, 1),
                ("Which attribute is used to specify the URL in a link?",
                 ["src", "url", "href", "link"], 2, 1),
            ],
        },
    },
    {
        "title": "CSS Styling Basics",
        "description": "Style your web pages with CSS",
        "content": (
            "CSS is used to style HTML elements. Learn selectors, the box model, "
            "flexbox, grid and responsive design."
        ),
        "video_url": "https://www.youtube.com/embed/yfoY53QXEnI",
        "level": Lesson.Level.INTERMEDIATE,
        "quiz": {
            "title": "CSS Fundamentals Quiz",
            "description": "Test your CSS knowledge and styling concepts",
            "questions": [
                ("Which CSS property is used to change the text color?",
                 ["text-color", "color", "font-color", "text-style"], 1, 1),
                ("What does CSS stand for?",
                 ["Computer Style Sheets", "Cascading Style Sheets",
                  "Creative Style Sheets", "Colorful Style Sheets"], 1, 1),
            ],
        },
    },
    {
        "title": "Database Design Principles",
        "description": "Design efficient and scalable databases",
        "content": (
            "Understanding database design is crucial for building efficient applications. "
            "This lesson covers normalization, relationships and indexing."
        ),
        "video_url": "https://www.youtube.com/embed/ztHopE5Wnpc",
        "level": Lesson.Level.ADVANCED,
        "quiz": {
            "title": "Database Quiz",
            "description": "Test your database design knowledge",
            "questions": [
                ("What is a primary key in a database?",
                 ["A key that opens the database", "A unique identifier for records",
                  "The first key created", "A password"], 1, 2),
            ],
        },
    },
]

# (username, lesson title, rating, comment)
FEEDBACK = [
    ("john_student", "Introduction to JavaScript", 5, "Excellent lesson! Very clear explanations and great examples."),
    ("jane_student", "Introduction to JavaScript", 4, "Good content, but could use more practical exercises."),
    ("john_student", "HTML Fundamentals", 4, "Well structured lesson with good pace."),
    ("bob_student", "HTML Fundamentals", 5, "Perfect introduction to the topic!"),
]


class Command(BaseCommand):
    help = "Seed demo users, lessons, quizzes and feedback for local development."

    def add_arguments(self, parser):
        parser.add_argument(
            "--reset-passwords",
            action="store_true",
            help="Reset demo account passwords even if the users already exist",
        )

    def handle(self, *args, **options):
        reset_passwords = bool(options.get("reset_passwords"))

        with transaction.atomic():
            # 1) Users
            users = {}
            for username, email, role, password in USERS:
                user, created = core_repo.user_get_or_create(
                    username,
                    defaults={
                        "email": email,
                        "role": role,
                        "is_active": True,
                        "is_staff": role == User.Role.ADMIN,
                    },
                )
                if created or reset_passwords:
                    user.set_password(password)
                    user.save(update_fields=["password"])
                users[username] = user
                if created:
                    self.stdout.write(self.style.SUCCESS(f"Created User: {username} ({role})"))
                else:
                    self.stdout.write(f"User already exists: {username}")

            admin = users["admin"]

            # 2) Lessons
            lessons = {}
            for item in LESSONS:
                lesson, created = core_repo.lesson_get_or_create(
                    item["title"],
                    defaults={
                        "description": item["description"],
                        "content": item["content"],
                        "video_url": item["video_url"],
                        "level": item["level"],
                        "created_by": admin,
                    },
                )
                lessons[lesson.title] = lesson
                if created:
                    self.stdout.write(self.style.SUCCESS(f"Created Lesson: {lesson.title}"))

            # 3) Quizzes (퀴즈 생성 use case 경유)
            for item in LESSONS:
                quiz = item["quiz"]
                if core_repo.quiz_exists_by_title(quiz["title"]):
                    self.stdout.write(f"Quiz already exists: {quiz['title']}")
                    continue

                draft = QuizDraft(
                    title=quiz["title"],
                    description=quiz["description"],
                    lesson_id=lessons[item["title"]].id,
                    questions=[
                        QuestionDraft(
                            question_text=text,
                            options=list(options_),
                            correct_index=correct,
                            points=points,
                        )
                        for text, options_, correct, points in quiz["questions"]
                    ],
                )
                quiz_id = create_quiz(DjangoUnitOfWork(), draft, created_by_id=admin.id)
                self.stdout.write(self.style.SUCCESS(f"Created Quiz: {quiz['title']} (id={quiz_id})"))

            # 4) Feedback
            for username, lesson_title, rating, comment in FEEDBACK:
                _, created = core_repo.feedback_get_or_create(
                    user=users[username],
                    lesson=lessons[lesson_title],
                    defaults={"rating": rating, "comment": comment},
                )
                if created:
                    self.stdout.write(self.style.SUCCESS(f"Created Feedback: {username} → {lesson_title}"))

        self.stdout.write(
            self.style.SUCCESS(
                f"Done. admin / {ADMIN_PASSWORD}, *_student / {STUDENT_PASSWORD}"
            )
        )
