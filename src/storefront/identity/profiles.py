"""Read helpers for user profiles."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from storefront.identity.profile import UserProfile

QUERY_LIMIT = 1000


def find_profile(user_id) -> UserProfile | None:
    repo = current_domain.repository_for(UserProfile)
    results = repo._dao.query.filter(user_id=str(user_id)).all().items
    return results[0] if results else None


def get_profile(user_id) -> UserProfile:
    profile = find_profile(user_id)
    if profile is None:
        raise ObjectNotFoundError(f"No profile for user {user_id}")
    return profile


def list_profiles() -> list[UserProfile]:
    repo = current_domain.repository_for(UserProfile)
    profiles = repo._dao.query.limit(QUERY_LIMIT).all().items
    return sorted(profiles, key=lambda profile: profile.created_at, reverse=True)


def count_profiles() -> int:
    repo = current_domain.repository_for(UserProfile)
    return repo._dao.query.limit(QUERY_LIMIT).all().total
