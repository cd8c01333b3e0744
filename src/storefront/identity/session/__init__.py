"""Session providers."""

from storefront.identity.session.memory_adapter import MemorySession
from storefront.identity.session.port import ADMIN_ROLE, Actor, SessionProvider
from storefront.identity.session.profile_adapter import ProfileSession

__all__ = ["ADMIN_ROLE", "Actor", "MemorySession", "ProfileSession", "SessionProvider"]
