"""
Cart pricing shared by the payment summary and order placement.
"""
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import List

from sqlalchemy.orm import Session, joinedload

from .Cart_model import CartItem

TAX_RATE = Decimal("0.10")


@dataclass
class CartTotals:
    total_items: int
    product_cost_cents: int
    shipping_cost_cents: int
    total_cost_before_tax_cents: int
    tax_cents: int
    total_cost_cents: int


def load_cart(db: Session) -> List[CartItem]:
    """All cart items with their product and delivery option loaded."""
    return (
        db.query(CartItem)
        .options(joinedload(CartItem.product), joinedload(CartItem.delivery_option))
        .order_by(CartItem.created_at.asc(), CartItem.id.asc())
        .all()
    )


def calculate_tax_cents(amount_cents: int) -> int:
    # Half-up rounding to whole cents
    tax = (Decimal(amount_cents) * TAX_RATE).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    return int(tax)


def calculate_cart_totals(cart_items: List[CartItem]) -> CartTotals:
    """
    Product cost is price x quantity per line; shipping is charged once per
    line at the price of its delivery option. Tax is 10% of both.
    """
    total_items = 0
    product_cost_cents = 0
    shipping_cost_cents = 0

    for item in cart_items:
        total_items += item.quantity
        if item.product is not None:
            product_cost_cents += item.product.price_cents * item.quantity
        if item.delivery_option is not None:
            shipping_cost_cents += item.delivery_option.price_cents

    total_before_tax = product_cost_cents + shipping_cost_cents
    tax_cents = calculate_tax_cents(total_before_tax)

    return CartTotals(
        total_items=total_items,
        product_cost_cents=product_cost_cents,
        shipping_cost_cents=shipping_cost_cents,
        total_cost_before_tax_cents=total_before_tax,
        tax_cents=tax_cents,
        total_cost_cents=total_before_tax + tax_cents,
    )
