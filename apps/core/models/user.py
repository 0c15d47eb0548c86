from django.contrib.auth.models import AbstractUser, Group, Permission
from django.db import models

from lms.domain.access import Principal, Role


# --------------------------------------------------
# Custom User (AUTH_USER_MODEL)
# --------------------------------------------------

class User(AbstractUser):
    """
    Custom User 모델
    - AUTH_USER_MODEL = core.User
    - role: admin / teacher / student (lms.domain.access.Role 값만 저장)
    - auth.User 와의 groups / permissions reverse accessor 충돌 방지
    """

    name = models.CharField(max_length=50, blank=True, null=True)
    phone = models.CharField(max_length=20, blank=True, null=True)

    role = models.CharField(
        max_length=20,
        choices=Role.choices(),
        default=Role.STUDENT.value,
        db_index=True,
    )

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

    class Meta:
        app_label = "core"
        db_table = "accounts_user"
        ordering = ["-id"]

    def __str__(self):
        return self.username

    @property
    def role_enum(self) -> Role:
        return Role.parse(self.role)

    @property
    def display_name(self) -> str:
        return self.name or self.get_full_name() or self.username

    def as_principal(self) -> Principal:
        return Principal(user_id=int(self.pk), role=self.role_enum)
