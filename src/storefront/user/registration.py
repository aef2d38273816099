"""User registration: commands and handler."""

from protean import handle
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.shared.errors import ConflictError
from storefront.user.user import User, UserRole
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


@storefront.command(part_of="User")
class RegisterUser:
    """Create a customer account from the public sign-up form."""

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    password: String(required=True, max_length=128)


@storefront.command(part_of="User")
class CreateAdminUser:
    """Create another administrator account on behalf of an existing admin."""

    name: String(required=True, max_length=100)
    email: String(required=True, max_length=254)
    password: String(required=True, max_length=128)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    def _create(self, command, role, conflict_message):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise ConflictError(conflict_message)

        user = User.register(
            name=command.name,
            email=command.email,
            password=command.password,
            role=role,
        )
        repo.add(user)
        logger.info("Registered user", user_id=str(user.id), role=role)
        return str(user.id)

    @handle(RegisterUser)
    def register_user(self, command):
        return self._create(command, UserRole.CUSTOMER.value, "Email already registered")

    @handle(CreateAdminUser)
    def create_admin_user(self, command):
        return self._create(command, UserRole.ADMIN.value, "Email already in use")
