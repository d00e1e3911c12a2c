from sqlalchemy import Column, Integer, ForeignKey, DateTime, String
from sqlalchemy.orm import relationship
from database import Base
from Common_module.datetime_utils import now_utc

DEFAULT_DELIVERY_OPTION_ID = "1"


class CartItem(Base):
    """
    One row per product in the (single, shared) cart.
    Adding a product that is already in the cart increments its quantity.
    """
    __tablename__ = "cart_items"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    product_id = Column(String(64), ForeignKey("products.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False, default=1)
    delivery_option_id = Column(
        String(64),
        ForeignKey("delivery_options.id"),
        nullable=False,
        default=DEFAULT_DELIVERY_OPTION_ID,
    )

    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=now_utc, onupdate=now_utc)

    # Relationships are only loaded when a query asks for them (joinedload)
    product = relationship("Product", lazy="noload")
    delivery_option = relationship("DeliveryOption", lazy="noload")
