from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..enums import DayOfWeekEnum


class MealItem(BaseModel):
    name: str = Field(min_length=1)
    calories: int = Field(default=0, ge=0)
    protein_g: float = Field(default=0, ge=0)
    carbs_g: float = Field(default=0, ge=0)
    fat_g: float = Field(default=0, ge=0)

class MealPlanRequest(BaseModel):
    title: str = Field(min_length=1, max_length=120)
    day: DayOfWeekEnum
    meals: List[MealItem] = []

class UpdateMealPlanRequest(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=120)
    day: Optional[DayOfWeekEnum] = None
    meals: Optional[List[MealItem]] = None

class MealPlanOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    day: DayOfWeekEnum
    meals: List[MealItem]
    total_calories: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
