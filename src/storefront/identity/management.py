"""User management: commands and handler."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.identity.profile import UserProfile, UserRole
from storefront.identity.profiles import find_profile, get_profile

logger = structlog.get_logger(__name__)


@storefront.command(part_of="UserProfile")
class RegisterProfile:
    """Create the storefront profile for a user who signed up."""

    user_id: String(required=True, max_length=255)
    email: String(required=True, max_length=254)
    first_name: String(max_length=100)
    last_name: String(max_length=100)
    role: String(max_length=20, default=UserRole.USER.value)


@storefront.command(part_of="UserProfile")
class PromoteToAdmin:
    user_id: String(required=True, max_length=255)


@storefront.command(part_of="UserProfile")
class RevokeAdmin:
    user_id: String(required=True, max_length=255)


@storefront.command(part_of="UserProfile")
class DeleteProfile:
    user_id: String(required=True, max_length=255)


@storefront.command_handler(part_of=UserProfile)
class ManageProfilesHandler:
    @handle(RegisterProfile)
    def register_profile(self, command):
        if find_profile(command.user_id) is not None:
            raise ValidationError({"user_id": ["A profile already exists for this user"]})

        profile = UserProfile.register(
            user_id=command.user_id,
            email=command.email,
            first_name=command.first_name,
            last_name=command.last_name,
            role=command.role or UserRole.USER.value,
        )
        current_domain.repository_for(UserProfile).add(profile)
        return str(profile.id)

    @handle(PromoteToAdmin)
    def promote_to_admin(self, command):
        profile = get_profile(command.user_id)
        profile.promote_to_admin()
        current_domain.repository_for(UserProfile).add(profile)

    @handle(RevokeAdmin)
    def revoke_admin(self, command):
        profile = get_profile(command.user_id)
        profile.revoke_admin()
        current_domain.repository_for(UserProfile).add(profile)

    @handle(DeleteProfile)
    def delete_profile(self, command):
        profile = get_profile(command.user_id)
        current_domain.repository_for(UserProfile)._dao.delete(profile)
        logger.info("Profile deleted", user_id=command.user_id)
