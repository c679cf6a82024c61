from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.data.models.enums import Role
from app.data.models.user import UserModel
from app.domain.errors import ConflictError, InvalidCredentialsError, UserNotFoundError
from app.repos.user_repo import UserRepo
from app.utils.security import hash_password, verify_password, create_access_token
from app.utils.logging import get_logger

logger = get_logger(__name__)


def normalize_email(email: str) -> str:
    return email.strip().lower()


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def signup(self, role: Role, name: str, email: str, password: str) -> tuple[UserModel, str]:
        email = normalize_email(email)
        if self.repo.get_by_email(email):
            logger.warning(f"Signup rejected, email already registered (role={role.value})")
            raise ConflictError()

        user = UserModel(
            role=role,
            name=name.strip(),
            email=email,
            password=hash_password(password),
        )
        try:
            created = self.repo.create_user(user)
        except IntegrityError:
            # rownolegla rejestracja na ten sam email
            self.repo.rollback()
            raise ConflictError()

        logger.info(f"User {created.id} signed up as {created.role.value}")
        return created, create_access_token(created.id)

    def login(self, email: str, password: str) -> tuple[UserModel, str]:
        user = self.repo.get_by_email(normalize_email(email))
        if not user:
            raise UserNotFoundError()

        if not verify_password(password, user.password):
            logger.warning(f"Failed login for user {user.id}")
            raise InvalidCredentialsError()

        logger.info(f"User {user.id} logged in")
        return user, create_access_token(user.id)

    def get_user(self, user_id: int) -> UserModel | None:
        return self.repo.get_user(user_id)
