"""Session resolved from a user id and the stored user profile.

Used by the HTTP surface, where the auth provider has already verified the
user and passes its id along with the request.
"""

from storefront.identity.profiles import find_profile
from storefront.identity.session.port import Actor, SessionProvider


class ProfileSession(SessionProvider):
    def __init__(self, user_id: str | None) -> None:
        self.user_id = user_id

    def current_actor(self) -> Actor | None:
        if not self.user_id:
            return None

        profile = find_profile(self.user_id)
        if profile is None:
            return None
        return Actor(user_id=str(profile.user_id), email=profile.email, role=profile.role)
