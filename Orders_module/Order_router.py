from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from .Order_crud import (
    EmptyCartError,
    create_order_from_cart,
    get_order,
    list_orders,
    products_by_id,
)
from .Order_model import Order
from .Order_schema import OrderResponse
from Product_module.Product_schema import ProductResponse
from deps import get_db

router = APIRouter(prefix="/api/orders", tags=["Orders"])


def build_order_response(order: Order, products: Optional[dict] = None) -> OrderResponse:
    """Serialize an order, embedding each line's product when ``products`` is given."""
    response = OrderResponse.model_validate(order)
    if products is None:
        return response

    for line in response.products:
        product = products.get(line.product_id)
        if product is not None:
            line.product = ProductResponse.model_validate(product)
    return response


@router.get("", response_model=List[OrderResponse], response_model_exclude_none=True)
def get_orders(
    expand: Optional[str] = Query(None, description="Use 'products' to embed product details"),
    db: Session = Depends(get_db),
):
    orders = list_orders(db)
    products = products_by_id(db, orders) if expand == "products" else None
    return [build_order_response(order, products) for order in orders]


@router.post(
    "",
    response_model=OrderResponse,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def place_order(db: Session = Depends(get_db)):
    try:
        order = create_order_from_cart(db)
    except EmptyCartError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return build_order_response(order)


@router.get("/{order_id}", response_model=OrderResponse, response_model_exclude_none=True)
def get_order_detail(
    order_id: str,
    expand: Optional[str] = Query(None, description="Use 'products' to embed product details"),
    db: Session = Depends(get_db),
):
    order = get_order(db, order_id)
    if not order:
        raise HTTPException(status_code=404, detail="Order not found")

    products = products_by_id(db, [order]) if expand == "products" else None
    return build_order_response(order, products)
