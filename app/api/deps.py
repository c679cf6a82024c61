# app/api/deps.py
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.data.models.enums import Role
from app.data.models.user import UserModel
from app.domain.errors import ForbiddenError, UnauthenticatedError
from app.services.user_service import UserService
from app.utils.security import decode_access_token

#auto_error=False - brak tokena obslugujemy sami, jednolity 401
bearer_scheme = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    db: Session = Depends(get_db),
) -> UserModel:
    if credentials is None or not credentials.credentials:
        raise UnauthenticatedError("No token. Auth denied")

    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        raise UnauthenticatedError()

    user = UserService(db).get_user(user_id)
    if user is None:
        raise UnauthenticatedError()
    return user


def require_seller(user: UserModel = Depends(get_current_user)) -> UserModel:
    # tylko jawnie seller, kazda inna rola odrzucona
    if user.role is not Role.SELLER:
        raise ForbiddenError()
    return user
