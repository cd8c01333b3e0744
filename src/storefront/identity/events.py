"""Domain events for the UserProfile aggregate."""

from protean.fields import DateTime, Identifier, String

from storefront.domain import storefront


@storefront.event(part_of="UserProfile")
class ProfileRegistered:
    """A signed-up user got a storefront profile."""

    __version__ = 1

    profile_id: Identifier(required=True)
    user_id: String(required=True)
    email: String(required=True)
    role: String(required=True)
    registered_at: DateTime(required=True)


@storefront.event(part_of="UserProfile")
class RoleChanged:
    """A user was promoted to admin or had admin rights removed."""

    __version__ = 1

    profile_id: Identifier(required=True)
    user_id: String(required=True)
    previous_role: String(required=True)
    new_role: String(required=True)
