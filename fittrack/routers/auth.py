from datetime import timedelta, datetime, UTC
from typing import Annotated, Optional
from fastapi import HTTPException, Depends, APIRouter, Request, Response, status
from fastapi.security import OAuth2PasswordBearer
from jose import jwt, JWTError
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from ..core.settings import settings
from ..database import get_db
from ..models import User
from ..schemas.user_schemas import CreateUserRequest, LoginRequest, UserOut

router = APIRouter(prefix="/api/users", tags=["auth"])

COOKIE_NAME = "jwt"

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/users/auth", auto_error=False)

bcryptcontext=CryptContext(schemes=["bcrypt"], deprecated="auto")

db_dependency = Annotated[Session,Depends(get_db)]


def authenticate_user(email: str, password: str, db: Session):
    user_model= db.query(User).filter(User.email == email.lower()).first()
    if not user_model or not bcryptcontext.verify(password, user_model.hashed_password):
        return False
    return user_model


def create_access_token(email: str, id: int, expires_delta: timedelta):
    to_encode = {"email": email, "id": id}
    expires_time = datetime.now(UTC) + expires_delta
    to_encode.update({"exp": expires_time})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def set_auth_cookie(response: Response, user: User) -> None:
    expires = timedelta(days=settings.ACCESS_TOKEN_EXPIRE_DAYS)
    token = create_access_token(user.email, user.id, expires)
    response.set_cookie(
        COOKIE_NAME,
        token,
        httponly=True,
        secure=settings.is_production,
        samesite="strict",
        max_age=int(expires.total_seconds()),
    )


def get_current_user(request: Request, bearer: Annotated[Optional[str], Depends(oauth2_scheme)], db: db_dependency):
    token = request.cookies.get(COOKIE_NAME) or bearer
    if not token:
        raise HTTPException(status_code=401, detail="Not authorized, no token")
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        email: str = payload.get('email')
        user_id: int = payload.get('id')
        if not email or not user_id:
            raise HTTPException(status_code=401, detail="Not authorized, token failed")
    except JWTError:
        raise HTTPException(status_code=401, detail="Not authorized, token failed")
    # tokens outlive deleted accounts
    if db.query(User.id).filter(User.id == user_id).scalar() is None:
        raise HTTPException(status_code=401, detail="Not authorized, token failed")
    return {'email': email, 'id': user_id}

current_user_dependency = Annotated[dict, Depends(get_current_user)]


@router.post("", status_code=status.HTTP_201_CREATED, response_model=UserOut)
def register_user(db: db_dependency, user: CreateUserRequest, response: Response):
    email = user.email.lower()
    if db.query(User).filter(User.email == email).first():
        raise HTTPException(status_code=400, detail="User already exists")
    user_model=User(
        name=user.name,
        email=email,
        hashed_password=bcryptcontext.hash(user.password),
        )
    db.add(user_model)
    db.commit()
    db.refresh(user_model)
    set_auth_cookie(response, user_model)
    return user_model

@router.post("/auth", response_model=UserOut)
def login_user(db: db_dependency, credentials: LoginRequest, response: Response):
    user_model = authenticate_user(credentials.email, credentials.password, db)
    if not user_model:
        raise HTTPException(status_code=401, detail="Invalid email or password")
    set_auth_cookie(response, user_model)
    return user_model

@router.post("/logout")
def logout_user(response: Response):
    response.delete_cookie(COOKIE_NAME)
    return {"message": "Logged out successfully"}
