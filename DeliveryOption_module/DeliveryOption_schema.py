from datetime import datetime
from typing import Optional

from Common_module.schema_base import CamelModel


class DeliveryOptionResponse(CamelModel):
    id: str
    delivery_days: int
    price_cents: int
    created_at: datetime
    updated_at: datetime
    # Only populated with ?expand=estimatedDeliveryTime
    estimated_delivery_time_ms: Optional[int] = None
