from sqlalchemy import Column, Integer, String, DateTime
from database import Base
from Common_module.datetime_utils import now_utc


class DeliveryOption(Base):
    __tablename__ = "delivery_options"

    id = Column(String(64), primary_key=True, index=True)
    delivery_days = Column(Integer, nullable=False)
    price_cents = Column(Integer, nullable=False)

    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=now_utc, onupdate=now_utc)
