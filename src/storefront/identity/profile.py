"""UserProfile aggregate: a storefront user and their role."""

from datetime import datetime
from enum import Enum

from protean.fields import DateTime, String

from storefront.domain import storefront


class UserRole(Enum):
    USER = "user"
    ADMIN = "admin"


@storefront.aggregate
class UserProfile:
    """Profile kept for every user the auth provider knows about.

    ``user_id`` is the auth provider's id for the user; the role decides
    whether the admin dashboard is available to them.
    """

    user_id: String(required=True, max_length=255, unique=True)
    email: String(required=True, max_length=254)
    first_name: String(max_length=100)
    last_name: String(max_length=100)
    role: String(choices=UserRole, default=UserRole.USER.value)
    created_at: DateTime(default=datetime.now)

    @classmethod
    def register(cls, user_id, email, first_name=None, last_name=None, role=UserRole.USER.value):
        from storefront.identity.events import ProfileRegistered

        now = datetime.now()
        profile = cls(
            user_id=str(user_id),
            email=email,
            first_name=first_name,
            last_name=last_name,
            role=role,
            created_at=now,
        )
        profile.raise_(
            ProfileRegistered(
                profile_id=profile.id,
                user_id=str(user_id),
                email=email,
                role=role,
                registered_at=now,
            )
        )
        return profile

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)

    def _change_role(self, new_role: UserRole) -> None:
        from storefront.identity.events import RoleChanged

        if self.role == new_role.value:
            return

        previous = self.role
        self.role = new_role.value
        self.raise_(
            RoleChanged(
                profile_id=self.id,
                user_id=self.user_id,
                previous_role=previous,
                new_role=new_role.value,
            )
        )

    def promote_to_admin(self) -> None:
        self._change_role(UserRole.ADMIN)

    def revoke_admin(self) -> None:
        self._change_role(UserRole.USER)
