from fastapi import APIRouter, HTTPException, Response, status

from .auth import bcryptcontext, current_user_dependency, db_dependency, set_auth_cookie, COOKIE_NAME
from ..models import User
from ..schemas.user_schemas import UpdateUserRequest, UserOut

router = APIRouter(prefix="/api/users", tags=["users"])


def _load_user(db, user_id: int) -> User:
    user_model = db.query(User).filter(User.id == user_id).first()
    if user_model is None:
        raise HTTPException(status_code=404, detail="User not found")
    return user_model

@router.get("/profile", response_model=UserOut)
def get_user_profile(db: db_dependency, user: current_user_dependency):
    return _load_user(db, user['id'])

@router.put("/profile", response_model=UserOut)
def update_user_profile(db: db_dependency, user: current_user_dependency, update: UpdateUserRequest, response: Response):
    user_model = _load_user(db, user['id'])

    if update.email is not None:
        email = update.email.lower()
        taken = db.query(User).filter(User.email == email, User.id != user_model.id).first()
        if taken:
            raise HTTPException(status_code=400, detail="Email already in use")
        user_model.email = email
    if update.name is not None:
        user_model.name = update.name
    if update.password is not None:
        user_model.hashed_password = bcryptcontext.hash(update.password)

    db.commit()
    db.refresh(user_model)
    # token carries the email, so reissue it
    set_auth_cookie(response, user_model)
    return user_model

@router.delete("/profile", status_code=status.HTTP_204_NO_CONTENT)
def delete_user_profile(db: db_dependency, user: current_user_dependency, response: Response):
    user_model = _load_user(db, user['id'])
    db.delete(user_model)
    db.commit()
    response.delete_cookie(COOKIE_NAME)
