"""
Order model - a placed order with a frozen copy of its cart lines.
"""
from sqlalchemy import Column, String, DateTime, JSON, BigInteger, Integer
from database import Base
from Common_module.datetime_utils import now_utc


class Order(Base):
    __tablename__ = "orders"

    id = Column(String(64), primary_key=True, index=True)   # UUID string
    order_time_ms = Column(BigInteger, nullable=False, index=True)   # Epoch milliseconds
    total_cost_cents = Column(Integer, nullable=False)

    # List of {"productId", "quantity", "estimatedDeliveryTimeMs"}
    products = Column(JSON, nullable=False, default=list)

    # Timestamps
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=now_utc, onupdate=now_utc)
