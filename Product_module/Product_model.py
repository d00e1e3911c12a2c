from sqlalchemy import Column, Integer, String, JSON, DateTime
from database import Base
from Common_module.datetime_utils import now_utc


class Product(Base):
    __tablename__ = "products"

    id = Column(String(64), primary_key=True, index=True)
    image = Column(String(500), nullable=False)
    name = Column(String(200), nullable=False)

    rating = Column(JSON, nullable=False)        # {"stars": float, "count": int}
    price_cents = Column(Integer, nullable=False)
    keywords = Column(JSON, nullable=False, default=list)   # List of search keywords

    # Application-assigned so seed rows can carry deterministic timestamps
    created_at = Column(DateTime(timezone=True), nullable=False, default=now_utc, index=True)
    updated_at = Column(DateTime(timezone=True), nullable=False, default=now_utc, onupdate=now_utc)
