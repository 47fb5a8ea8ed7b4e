from fastapi import (
    FastAPI,
    Request,
    Query,
    Depends,
)
from fastapi.responses import JSONResponse

from typing import Any, Dict, List
import logging

from grocery.domain.Ingredient import IngredientItem
from grocery.infra.Product_Catalog import CatalogError, ProductCatalog
from grocery.logic.pricing.cost_estimator import CostEstimator
from grocery.logic.pricing.matcher import PriceMatcher
from grocery.logic.shopping.list_builder import aggregate
from grocery.logic.shopping.scaling import collect_ingredients
from grocery.utilities.config import PRICING_MAX_WORKERS
from grocery.utilities.validators import GroceryListRequest, RecipeGroceryRequest

# Routers
from grocery.api.routes import prices
from grocery.api.routes.prices import get_catalog

# Logging
logger = logging.getLogger("grocery_app")

# Initialize FastAPI app
app = FastAPI(title="Grocery List & Cost Estimate API")

# Include routers
app.include_router(prices.router)


@app.exception_handler(CatalogError)
async def _catalog_error_handler(request: Request, exc: CatalogError):
    logger.error("Catalog failure on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": "Price catalog unavailable"})


# -------------------- Helpers --------------------
def build_response(ingredients: List[IngredientItem], catalog: ProductCatalog, include_cost: bool) -> Dict[str, Any]:
    """Aggregate ingredient lines and, when asked, attach the cost estimate."""
    items = aggregate(ingredients)
    body: Dict[str, Any] = {"items": [i.to_dict() for i in items]}
    if include_cost:
        estimator = CostEstimator(PriceMatcher(catalog), max_workers=PRICING_MAX_WORKERS)
        body["pricing"] = estimator.price_items(items).to_dict()
    return body


@app.get("/health")
def health():
    return {"ok": True}


# -------------------- API: Grocery List (JSON) --------------------
@app.post('/api/grocery-list')
@app.post('/api/grocery-list/')
def api_grocery_list(payload: GroceryListRequest,
                     include_cost: bool = Query(default=True),
                     catalog: ProductCatalog = Depends(get_catalog)):
    ingredients = [IngredientItem(i.name, i.quantity, i.unit) for i in payload.items]
    logger.info("Grocery list request: %d lines, include_cost=%s", len(ingredients), include_cost)
    return build_response(ingredients, catalog, include_cost)


@app.post('/api/grocery-list/recipes')
@app.post('/api/grocery-list/recipes/')
def api_grocery_list_from_recipes(payload: RecipeGroceryRequest,
                                  catalog: ProductCatalog = Depends(get_catalog)):
    recipes = [r.model_dump() for r in payload.recipes]
    ingredients = collect_ingredients(recipes)
    logger.info("Grocery list request: %d recipes, %d lines", len(recipes), len(ingredients))
    return build_response(ingredients, catalog, payload.include_cost)
