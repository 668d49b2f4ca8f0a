from django.db import models
from django.contrib.auth.models import AbstractUser, Group, Permission, UserManager as DjangoUserManager


# --------------------------------------------------
# Manager
# --------------------------------------------------

class UserManager(DjangoUserManager):
    """createsuperuser 로 만든 계정은 항상 admin 역할."""

    def create_superuser(self, username, email=None, password=None, **extra_fields):
        extra_fields.setdefault("role", User.Role.ADMIN)
        return super().create_superuser(username, email, password, **extra_fields)


# --------------------------------------------------
# Custom User (AUTH_USER_MODEL)
# --------------------------------------------------

class User(AbstractUser):
    """
    Custom User 모델
    - AUTH_USER_MODEL = core.User
    - role 은 닫힌 열거형 (admin / student). 문자열 비교 대신 User.Role 사용
    - API 로는 삭제되지 않는다 (결과/피드백 이력 보존)
    """

    class Role(models.TextChoices):
        ADMIN = "admin", "Admin"
        STUDENT = "student", "Student"

    email = models.EmailField(unique=True)
    role = models.CharField(
        max_length=10,
        choices=Role.choices,
        default=Role.STUDENT,
        db_index=True,
    )
    updated_at = models.DateTimeField(auto_now=True)

    # 🔥 핵심: auth.User 와 reverse accessor 충돌 방지
    groups = models.ManyToManyField(
        Group,
        related_name="core_users",
        blank=True,
    )
    user_permissions = models.ManyToManyField(
        Permission,
        related_name="core_users",
        blank=True,
    )

    objects = UserManager()

    class Meta:
        app_label = "core"
        db_table = "accounts_user"
        ordering = ["-id"]

    def __str__(self):
        return self.username

    @property
    def is_admin(self) -> bool:
        return self.role == self.Role.ADMIN

    @property
    def is_student(self) -> bool:
        return self.role == self.Role.STUDENT
