from datetime import datetime
from typing import Optional

from pydantic import Field

from Common_module.schema_base import CamelModel
from Product_module.Product_schema import ProductResponse

MIN_QUANTITY = 1
MAX_QUANTITY = 10


class CartAdd(CamelModel):
    product_id: str = Field(..., description="ID of the product to add", min_length=1)
    quantity: int = Field(1, description="How many units to add")


class CartUpdate(CamelModel):
    quantity: Optional[int] = Field(None, description="New quantity for the cart item")
    delivery_option_id: Optional[str] = Field(None, description="Delivery option to use")


class CartItemResponse(CamelModel):
    id: int
    product_id: str
    quantity: int
    delivery_option_id: str
    created_at: datetime
    updated_at: datetime
    # Only populated with ?expand=product
    product: Optional[ProductResponse] = None
