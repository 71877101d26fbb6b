from fastapi import APIRouter, HTTPException, status

from .auth import current_user_dependency, db_dependency
from ..models import UserStatus
from ..schemas.user_schemas import UpdateUserStatusRequest, UserStatusOut, UserStatusRequest

router = APIRouter(prefix="/api/user", tags=["user_status"])


def _find_status(db, user_id: int):
    return db.query(UserStatus).filter(UserStatus.user_id == user_id).first()

@router.get("/status", response_model=UserStatusOut)
def get_user_status(db: db_dependency, user: current_user_dependency):
    status_model = _find_status(db, user['id'])
    if not status_model:
        raise HTTPException(status_code=404, detail="User status not found")
    return status_model

@router.post("/status", status_code=status.HTTP_201_CREATED, response_model=UserStatusOut)
def create_user_status(db: db_dependency, user: current_user_dependency, body: UserStatusRequest):
    if _find_status(db, user['id']):
        raise HTTPException(status_code=400, detail="User status already exists")
    status_model = UserStatus(user_id=user['id'], **body.model_dump())
    db.add(status_model)
    db.commit()
    db.refresh(status_model)
    return status_model

@router.put("/status", response_model=UserStatusOut)
def update_user_status(db: db_dependency, user: current_user_dependency, body: UpdateUserStatusRequest):
    status_model = _find_status(db, user['id'])
    if not status_model:
        raise HTTPException(status_code=404, detail="User status not found")
    for field, value in body.model_dump(exclude_unset=True).items():
        if value is not None:
            setattr(status_model, field, value)
    db.commit()
    db.refresh(status_model)
    return status_model

@router.delete("/status", status_code=status.HTTP_204_NO_CONTENT)
def delete_user_status(db: db_dependency, user: current_user_dependency):
    status_model = _find_status(db, user['id'])
    if not status_model:
        raise HTTPException(status_code=404, detail="User status not found")
    db.delete(status_model)
    db.commit()
