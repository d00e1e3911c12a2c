from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from .Product_model import Product
from .Product_schema import ProductResponse
from deps import get_db

router = APIRouter(prefix="/api/products", tags=["Products"])


def matches_search(product: Product, search: str) -> bool:
    """Case-insensitive match on the product name or any of its keywords."""
    needle = search.lower()
    if needle in product.name.lower():
        return True
    return any(needle in keyword.lower() for keyword in (product.keywords or []))


@router.get("", response_model=List[ProductResponse])
def get_products(
    search: Optional[str] = Query(None, description="Filter by name or keyword"),
    db: Session = Depends(get_db),
):
    products = db.query(Product).order_by(Product.created_at.asc()).all()

    if search:
        products = [product for product in products if matches_search(product, search)]

    return products
