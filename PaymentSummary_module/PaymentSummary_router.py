from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from .PaymentSummary_schema import PaymentSummaryResponse
from Cart_module.cart_service import calculate_cart_totals, load_cart
from deps import get_db

router = APIRouter(prefix="/api/payment-summary", tags=["Payment Summary"])


@router.get("", response_model=PaymentSummaryResponse)
def get_payment_summary(db: Session = Depends(get_db)):
    totals = calculate_cart_totals(load_cart(db))
    return PaymentSummaryResponse.model_validate(totals)
