# recipe_book/api/routes_recipes.py
# 레시피 CRUD 라우터. 검증/DB 처리는 services.recipes 에 있고 여기서는 상태코드/바디만 정한다

from __future__ import annotations
from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from recipe_book.core.deps import get_db
from recipe_book.db.models.schemas import RecipeIn
from recipe_book.services import recipes as svc

router = APIRouter(prefix="/recipes", tags=["recipes"])

@router.get("")
async def list_recipes(
    tags: Optional[str] = Query(None, description="쉼표 구분 태그 이름"),
    cuisine: Optional[str] = Query(None, description="요리 종류 (부분일치)"),
    ingredients: Optional[str] = Query(None, description="쉼표 구분 재료 이름 (모두 포함)"),
    name: Optional[str] = Query(None, description="레시피 이름 (부분일치)"),
    db=Depends(get_db),
):
    recipes = await svc.list_recipes(db, tags=tags, cuisine=cuisine, ingredients=ingredients, name=name)
    return {"recipes": recipes}

@router.get("/{recipe_id}")
async def get_recipe(recipe_id: str, db=Depends(get_db)):
    return await svc.get_recipe(db, recipe_id)

@router.post("", status_code=status.HTTP_201_CREATED)
async def create_recipe(payload: RecipeIn, db=Depends(get_db)):
    recipe_id = await svc.create_recipe(db, payload)
    return {"message": "Recipe created successfully", "recipeId": recipe_id}

@router.put("/{recipe_id}")
async def replace_recipe(recipe_id: str, payload: RecipeIn, db=Depends(get_db)):
    await svc.replace_recipe(db, recipe_id, payload)
    return {"message": "Recipe updated successfully"}

@router.delete("/{recipe_id}")
async def delete_recipe(recipe_id: str, db=Depends(get_db)):
    await svc.delete_recipe(db, recipe_id)
    return {"message": "Recipe deleted successfully"}
