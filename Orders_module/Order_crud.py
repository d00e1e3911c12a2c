"""
Order CRUD operations.
"""
import logging
import uuid
from typing import Dict, List, Optional

from sqlalchemy.orm import Session

from .Order_model import Order
from Cart_module.Cart_model import CartItem
from Cart_module.cart_service import calculate_cart_totals, load_cart
from Common_module.datetime_utils import add_days_ms, now_epoch_ms
from Product_module.Product_model import Product

logger = logging.getLogger(__name__)


class EmptyCartError(ValueError):
    pass


def list_orders(db: Session) -> List[Order]:
    """Newest orders first."""
    return db.query(Order).order_by(Order.order_time_ms.desc()).all()


def get_order(db: Session, order_id: str) -> Optional[Order]:
    return db.query(Order).filter(Order.id == order_id).first()


def create_order_from_cart(db: Session) -> Order:
    """
    Turn the whole cart into an order and empty the cart.
    Both happen in one commit.

    Raises:
        EmptyCartError: if there is nothing in the cart
    """
    cart_items = load_cart(db)
    if not cart_items:
        raise EmptyCartError("Cart is empty")

    totals = calculate_cart_totals(cart_items)
    order_time_ms = now_epoch_ms()

    order_products = []
    for item in cart_items:
        delivery_days = item.delivery_option.delivery_days if item.delivery_option else 0
        order_products.append({
            "productId": item.product_id,
            "quantity": item.quantity,
            "estimatedDeliveryTimeMs": add_days_ms(order_time_ms, delivery_days),
        })

    order = Order(
        id=str(uuid.uuid4()),
        order_time_ms=order_time_ms,
        total_cost_cents=totals.total_cost_cents,
        products=order_products,
    )
    db.add(order)
    db.query(CartItem).delete(synchronize_session=False)
    db.commit()
    db.refresh(order)

    logger.info(
        "Created order %s with %s line(s), total %s cents",
        order.id, len(order_products), order.total_cost_cents,
    )
    return order


def products_by_id(db: Session, orders: List[Order]) -> Dict[str, Product]:
    """Load every product referenced by the given orders in one query."""
    product_ids = {
        line["productId"]
        for order in orders
        for line in (order.products or [])
    }
    if not product_ids:
        return {}
    products = db.query(Product).filter(Product.id.in_(product_ids)).all()
    return {product.id: product for product in products}
