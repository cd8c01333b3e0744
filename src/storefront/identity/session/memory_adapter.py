"""Session held in memory, signed in and out explicitly."""

import structlog

from storefront.identity.session.port import Actor, SessionProvider

logger = structlog.get_logger(__name__)


class MemorySession(SessionProvider):
    def __init__(self, actor: Actor | None = None) -> None:
        self._actor = actor

    def current_actor(self) -> Actor | None:
        return self._actor

    def sign_in(self, actor: Actor) -> None:
        self._actor = actor
        logger.info("Signed in", user_id=actor.user_id)

    def sign_out(self) -> None:
        if self._actor is not None:
            logger.info("Signed out", user_id=self._actor.user_id)
        self._actor = None
