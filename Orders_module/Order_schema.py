"""
Order schemas for request/response models.
"""
from datetime import datetime
from typing import List, Optional

from Common_module.schema_base import CamelModel
from Product_module.Product_schema import ProductResponse


class OrderProduct(CamelModel):
    """One frozen cart line inside an order"""
    product_id: str
    quantity: int
    estimated_delivery_time_ms: int
    # Only populated with ?expand=products
    product: Optional[ProductResponse] = None


class OrderResponse(CamelModel):
    id: str
    order_time_ms: int
    total_cost_cents: int
    products: List[OrderProduct]
    created_at: datetime
    updated_at: datetime
