from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.schemas import SignupIn, LoginIn, AuthOut, CheckOut, UserOut
from app.services.user_service import UserService

router = APIRouter(prefix="/user", tags=["user"])


@router.post("/signup", response_model=AuthOut, status_code=201)
def signup(payload: SignupIn, db: Session = Depends(get_db)):
    service = UserService(db)
    user, token = service.signup(payload.role, payload.name, payload.email, payload.password)
    return AuthOut(message="Signup successful", token=token, user=UserOut.model_validate(user))


@router.post("/login", response_model=AuthOut)
def login(payload: LoginIn, db: Session = Depends(get_db)):
    service = UserService(db)
    user, token = service.login(payload.email, payload.password)
    return AuthOut(message="Login successful", token=token, user=UserOut.model_validate(user))


@router.get("/check", response_model=CheckOut)
def check(user: UserModel = Depends(get_current_user)):
    return CheckOut(user=UserOut.model_validate(user))
