from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from ..enums import GenderEnum, ActivityLevelEnum, GoalEnum


class CreateUserRequest(BaseModel):
    name: str = Field(min_length=1, max_length=60)
    email: EmailStr
    password: str = Field(min_length=6, max_length=72)

class LoginRequest(BaseModel):
    email: EmailStr
    password: str

class UpdateUserRequest(BaseModel):
    name: Optional[str] = Field(default=None, min_length=1, max_length=60)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=6, max_length=72)

class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: Optional[datetime] = None


class UserStatusRequest(BaseModel):
    age: Optional[int] = Field(default=None, gt=0, lt=130)
    gender: Optional[GenderEnum] = None
    height_cm: Optional[float] = Field(default=None, gt=0)
    weight_kg: Optional[float] = Field(default=None, gt=0)
    activity_level: ActivityLevelEnum = ActivityLevelEnum.moderate
    goal: GoalEnum = GoalEnum.maintain

class UpdateUserStatusRequest(BaseModel):
    age: Optional[int] = Field(default=None, gt=0, lt=130)
    gender: Optional[GenderEnum] = None
    height_cm: Optional[float] = Field(default=None, gt=0)
    weight_kg: Optional[float] = Field(default=None, gt=0)
    activity_level: Optional[ActivityLevelEnum] = None
    goal: Optional[GoalEnum] = None

class UserStatusOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_id: int
    age: Optional[int] = None
    gender: Optional[GenderEnum] = None
    height_cm: Optional[float] = None
    weight_kg: Optional[float] = None
    activity_level: ActivityLevelEnum
    goal: GoalEnum
    updated_at: Optional[datetime] = None
