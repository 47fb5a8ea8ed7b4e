"""Store product entities: catalog rows and the cheapest-match result built from them."""
from typing import Any, Dict, Optional


class ProductRecord:
    '''A product as listed by a store, carrying only its most recent price.'''

    def __init__(self, store: str, product_name: str, unit: str, size_value: float,
                 size_unit: str, price_cents: int, affiliate_url_template: Optional[str] = None):
        self.store = store
        self.product_name = product_name
        self.unit = unit
        self.size_value = size_value
        self.size_unit = size_unit
        self.price_cents = price_cents
        self.affiliate_url_template = affiliate_url_template

    def __str__(self) -> str:
        return f"{self.store}: {self.product_name} ({self.size_value} {self.size_unit}) - {self.price_cents}c"

    __repr__ = __str__

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> "ProductRecord":
        d = dict(data) if isinstance(data, dict) else {}
        return ProductRecord(
            store=str(d.get("store") or ""),
            product_name=str(d.get("productName", d.get("product_name")) or ""),
            unit=str(d.get("unit") or ""),
            size_value=float(d.get("sizeValue", d.get("size_value")) or 0),
            size_unit=str(d.get("sizeUnit", d.get("size_unit")) or ""),
            price_cents=int(d.get("priceCents", d.get("price_cents")) or 0),
            affiliate_url_template=d.get("affiliateUrlTemplate", d.get("affiliate_url_template")),
        )


class MatchResult:
    '''Cheapest comparable product for an ingredient.

    ``unit_price`` is the exact price per base unit used for comparisons and
    cost arithmetic; ``unit_price_cents`` is its rounded, displayed form.
    '''

    def __init__(self, store_name: str, product_name: str, unit_price: float, unit_price_cents: int,
                 package_base_unit: str, package_base_size: float, affiliate_url: Optional[str] = None):
        self.store_name = store_name
        self.product_name = product_name
        self.unit_price = unit_price
        self.unit_price_cents = unit_price_cents
        self.package_base_unit = package_base_unit
        self.package_base_size = package_base_size
        self.affiliate_url = affiliate_url

    def __str__(self) -> str:
        return f"{self.product_name} @ {self.store_name} - {self.unit_price_cents}c/{self.package_base_unit}"

    __repr__ = __str__

    def to_dict(self) -> Dict[str, Any]:
        return {
            "storeName": self.store_name,
            "productName": self.product_name,
            "unitPriceCents": self.unit_price_cents,
            "packageBaseUnit": self.package_base_unit,
            "packageBaseSize": self.package_base_size,
            "affiliateUrl": self.affiliate_url,
        }
