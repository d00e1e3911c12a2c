from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from .DeliveryOption_model import DeliveryOption
from .DeliveryOption_schema import DeliveryOptionResponse
from Common_module.datetime_utils import add_days_ms, now_epoch_ms
from deps import get_db

router = APIRouter(prefix="/api/delivery-options", tags=["Delivery Options"])


@router.get("", response_model=List[DeliveryOptionResponse], response_model_exclude_none=True)
def get_delivery_options(
    expand: Optional[str] = Query(None, description="Use 'estimatedDeliveryTime' to include ETA"),
    db: Session = Depends(get_db),
):
    options = db.query(DeliveryOption).order_by(DeliveryOption.created_at.asc()).all()

    if expand != "estimatedDeliveryTime":
        return options

    now_ms = now_epoch_ms()
    return [
        DeliveryOptionResponse.model_validate(option).model_copy(
            update={"estimated_delivery_time_ms": add_days_ms(now_ms, option.delivery_days)}
        )
        for option in options
    ]
