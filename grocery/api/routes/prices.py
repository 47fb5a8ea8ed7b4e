from fastapi import APIRouter, Depends, HTTPException, Query
import logging

from grocery.infra.Product_Catalog import JsonProductCatalog, ProductCatalog
from grocery.logic.pricing.matcher import PriceMatcher

router = APIRouter(prefix="/api/prices")
logger = logging.getLogger(__name__)


# Loaded on first use and shared by every request until reloaded
_catalog = JsonProductCatalog()


def get_catalog() -> ProductCatalog:
    return _catalog


@router.post("/reload")
def reload_catalog():
    """Drop the cached catalog so the next lookup re-reads freshly scraped prices."""
    _catalog.reload()
    logger.info("Product catalog cache cleared: %s", _catalog.path)
    return {"ok": True}


@router.get("/cheapest")
def cheapest_product(name: str = Query(default=""), unit: str = Query(default="g"),
                     catalog: ProductCatalog = Depends(get_catalog)):
    name = name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="name is required")
    match = PriceMatcher(catalog).find_cheapest(name, unit)
    if match is None:
        logger.info("No comparable product for %r in %s", name, unit)
        raise HTTPException(status_code=404, detail="No products found")
    return match.to_dict()


@router.get("/compare")
def compare_products(name: str = Query(default=""), unit: str = Query(default="g"),
                     catalog: ProductCatalog = Depends(get_catalog)):
    """All comparable products for an ingredient, cheapest per base unit first."""
    name = name.strip()
    if not name:
        raise HTTPException(status_code=400, detail="name is required")
    options = PriceMatcher(catalog).compare_options(name, unit)
    return {"name": name, "unit": unit, "options": [o.to_dict() for o in options], "count": len(options)}
