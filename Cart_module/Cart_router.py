import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session, joinedload

from .Cart_model import CartItem, DEFAULT_DELIVERY_OPTION_ID
from .Cart_schema import CartAdd, CartUpdate, CartItemResponse, MIN_QUANTITY, MAX_QUANTITY
from Product_module.Product_model import Product
from DeliveryOption_module.DeliveryOption_model import DeliveryOption
from deps import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/cart-items", tags=["Cart"])

INVALID_QUANTITY_MESSAGE = f"Quantity must be a number between {MIN_QUANTITY} and {MAX_QUANTITY}"


def validate_quantity(quantity: int) -> None:
    if not MIN_QUANTITY <= quantity <= MAX_QUANTITY:
        raise HTTPException(status_code=400, detail=INVALID_QUANTITY_MESSAGE)


def get_cart_item_or_404(db: Session, product_id: str) -> CartItem:
    cart_item = db.query(CartItem).filter(CartItem.product_id == product_id).first()
    if not cart_item:
        raise HTTPException(status_code=404, detail="Cart item not found")
    return cart_item


@router.get("", response_model=List[CartItemResponse], response_model_exclude_none=True)
def get_cart_items(
    expand: Optional[str] = Query(None, description="Use 'product' to embed product details"),
    db: Session = Depends(get_db),
):
    query = db.query(CartItem)
    if expand == "product":
        query = query.options(joinedload(CartItem.product))
    return query.order_by(CartItem.created_at.asc(), CartItem.id.asc()).all()


@router.post("", response_model=CartItemResponse, response_model_exclude_none=True)
def add_to_cart(item: CartAdd, response: Response, db: Session = Depends(get_db)):
    """
    Add a product to the cart.
    If the product is already in the cart its quantity is increased instead.
    """
    product = db.query(Product).filter(Product.id == item.product_id).first()
    if not product:
        raise HTTPException(status_code=400, detail="Product not found")

    validate_quantity(item.quantity)

    cart_item = db.query(CartItem).filter(CartItem.product_id == item.product_id).first()
    if cart_item:
        new_quantity = cart_item.quantity + item.quantity
        validate_quantity(new_quantity)
        cart_item.quantity = new_quantity
        response.status_code = status.HTTP_200_OK
        logger.info("Increased quantity of %s in cart to %s", item.product_id, new_quantity)
    else:
        cart_item = CartItem(
            product_id=item.product_id,
            quantity=item.quantity,
            delivery_option_id=DEFAULT_DELIVERY_OPTION_ID,
        )
        db.add(cart_item)
        response.status_code = status.HTTP_201_CREATED
        logger.info("Added %s x%s to cart", item.product_id, item.quantity)

    db.commit()
    db.refresh(cart_item)
    return cart_item


@router.put("/{product_id}", response_model=CartItemResponse, response_model_exclude_none=True)
def update_cart_item(product_id: str, payload: CartUpdate, db: Session = Depends(get_db)):
    cart_item = get_cart_item_or_404(db, product_id)

    if payload.quantity is not None:
        validate_quantity(payload.quantity)
        cart_item.quantity = payload.quantity

    if payload.delivery_option_id is not None:
        delivery_option = (
            db.query(DeliveryOption)
            .filter(DeliveryOption.id == payload.delivery_option_id)
            .first()
        )
        if not delivery_option:
            raise HTTPException(status_code=400, detail="Invalid delivery option")
        cart_item.delivery_option_id = delivery_option.id

    db.commit()
    db.refresh(cart_item)
    return cart_item


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_cart_item(product_id: str, db: Session = Depends(get_db)):
    cart_item = get_cart_item_or_404(db, product_id)
    db.delete(cart_item)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
