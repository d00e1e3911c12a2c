from Common_module.schema_base import CamelModel


class PaymentSummaryResponse(CamelModel):
    total_items: int
    product_cost_cents: int
    shipping_cost_cents: int
    total_cost_before_tax_cents: int
    tax_cents: int
    total_cost_cents: int
