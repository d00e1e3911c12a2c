from datetime import datetime
from typing import List

from pydantic import Field

from Common_module.schema_base import CamelModel


class Rating(CamelModel):
    stars: float = Field(..., description="Average star rating", ge=0, le=5)
    count: int = Field(..., description="Number of ratings", ge=0)


class ProductResponse(CamelModel):
    id: str
    image: str
    name: str
    rating: Rating
    price_cents: int
    keywords: List[str] = []
    created_at: datetime
    updated_at: datetime
