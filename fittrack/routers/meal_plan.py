from typing import List, Optional

from fastapi import APIRouter, HTTPException, status

from .auth import current_user_dependency, db_dependency
from ..enums import DayOfWeekEnum
from ..models import MealPlan
from ..schemas.meal_plan_schemas import MealItem, MealPlanOut, MealPlanRequest, UpdateMealPlanRequest

router = APIRouter(prefix="/api/user", tags=["meal_plan"])


def _total_calories(meals: List[MealItem]) -> int:
    return sum(meal.calories for meal in meals)

def _find_plan(db, user_id: int, plan_id: int) -> MealPlan:
    plan = db.query(MealPlan).filter(MealPlan.id == plan_id, MealPlan.user_id == user_id).first()
    if not plan:
        raise HTTPException(status_code=404, detail="Meal plan not found")
    return plan

@router.get("/mealplan", response_model=List[MealPlanOut])
def list_meal_plans(db: db_dependency, user: current_user_dependency, day: Optional[DayOfWeekEnum] = None):
    query = db.query(MealPlan).filter(MealPlan.user_id == user['id'])
    if day is not None:
        query = query.filter(MealPlan.day == day)
    return query.order_by(MealPlan.id).all()

@router.post("/mealplan", status_code=status.HTTP_201_CREATED, response_model=MealPlanOut)
def create_meal_plan(db: db_dependency, user: current_user_dependency, body: MealPlanRequest):
    plan = MealPlan(
        user_id=user['id'],
        title=body.title,
        day=body.day,
        meals=[meal.model_dump() for meal in body.meals],
        total_calories=_total_calories(body.meals),
    )
    db.add(plan)
    db.commit()
    db.refresh(plan)
    return plan

@router.get("/mealplan/{plan_id}", response_model=MealPlanOut)
def get_meal_plan(plan_id: int, db: db_dependency, user: current_user_dependency):
    return _find_plan(db, user['id'], plan_id)

@router.put("/mealplan/{plan_id}", response_model=MealPlanOut)
def update_meal_plan(plan_id: int, db: db_dependency, user: current_user_dependency, body: UpdateMealPlanRequest):
    plan = _find_plan(db, user['id'], plan_id)
    if body.title is not None:
        plan.title = body.title
    if body.day is not None:
        plan.day = body.day
    if body.meals is not None:
        plan.meals = [meal.model_dump() for meal in body.meals]
        plan.total_calories = _total_calories(body.meals)
    db.commit()
    db.refresh(plan)
    return plan

@router.delete("/mealplan/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_meal_plan(plan_id: int, db: db_dependency, user: current_user_dependency):
    plan = _find_plan(db, user['id'], plan_id)
    db.delete(plan)
    db.commit()
