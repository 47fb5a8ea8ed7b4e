"""
Input validation schemas using Pydantic for the grocery list endpoints.
"""
from pydantic import BaseModel, Field, field_validator
from typing import List, Optional


class IngredientInput(BaseModel):
    """Schema for a single ingredient line."""
    name: str = Field(..., min_length=1, max_length=100)
    quantity: float = Field(..., gt=0, allow_inf_nan=False)
    unit: str = Field(..., min_length=1, max_length=20)

    @field_validator('name', 'unit')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError('Value cannot be blank')
        return v


class GroceryListRequest(BaseModel):
    """Schema for aggregating a flat list of already scaled ingredients."""
    items: List[IngredientInput] = Field(default_factory=list)


class RecipeInput(BaseModel):
    """Schema for a recipe contributing ingredients to a grocery list."""
    name: Optional[str] = None
    servings: Optional[int] = Field(None, ge=1, le=100)
    planned_servings: Optional[int] = Field(None, ge=1, le=100)
    ingredients: List[IngredientInput] = Field(default_factory=list)


class RecipeGroceryRequest(BaseModel):
    """Schema for building a grocery list from several recipes."""
    recipes: List[RecipeInput]
    include_cost: bool = True

    @field_validator('recipes')
    @classmethod
    def validate_recipes(cls, v):
        """Ensure at least one recipe is supplied."""
        if not v:
            raise ValueError('At least one recipe is required')
        return v
