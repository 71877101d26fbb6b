from datetime import datetime, timezone

from sqlalchemy import Column, String, Integer, Float, ForeignKey, DateTime, JSON
from sqlalchemy.orm import relationship
from sqlalchemy import Enum as PgEnum
from .enums import GenderEnum, ActivityLevelEnum, GoalEnum, DayOfWeekEnum
from .database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(60), nullable=False)
    email = Column(String(120), unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    status = relationship("UserStatus", back_populates="user", uselist=False, cascade="all, delete-orphan")
    meal_plans = relationship("MealPlan", back_populates="user", cascade="all, delete-orphan")

class UserStatus(Base):
    __tablename__ = "user_statuses"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)
    age = Column(Integer)
    gender = Column(PgEnum(GenderEnum, name="gender_enum"))
    height_cm = Column(Float)
    weight_kg = Column(Float)
    activity_level = Column(PgEnum(ActivityLevelEnum, name="activity_level_enum"), nullable=False, default=ActivityLevelEnum.moderate)
    goal = Column(PgEnum(GoalEnum, name="goal_enum"), nullable=False, default=GoalEnum.maintain)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="status")

class MealPlan(Base):
    __tablename__ = "meal_plans"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    title = Column(String(120), nullable=False)
    day = Column(PgEnum(DayOfWeekEnum, name="day_of_week_enum"), nullable=False)
    meals = Column(JSON, nullable=False, default=list)
    total_calories = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=utcnow)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="meal_plans")
