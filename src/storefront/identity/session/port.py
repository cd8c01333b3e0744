"""Session port: who is signed in right now.

Authentication itself belongs to the hosted auth provider; the storefront
only ever asks for the current actor.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass

ADMIN_ROLE = "admin"


@dataclass(frozen=True)
class Actor:
    user_id: str
    email: str | None = None
    role: str = "user"

    @property
    def is_admin(self) -> bool:
        return self.role == ADMIN_ROLE


class SessionProvider(ABC):
    @abstractmethod
    def current_actor(self) -> Actor | None:
        """Return the signed-in actor, or None for an anonymous visitor."""
        ...
