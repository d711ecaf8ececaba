from payment_payload.payload.validation import create_validated, fix_length, format_rate
from payment_payload.schemas.order import CalculatedTax
from payment_payload.schemas.transaction import Tax

def build_taxes(calculated_taxes: list[CalculatedTax], title: str) -> list[Tax]:
    """One Tax per calculated tax, in source order. Equal rates are not merged."""
    taxes = []
    for calculated_tax in calculated_taxes:
        tax = create_validated(
            Tax,
            "Tax",
            rate=calculated_tax.tax_rate,
            title=fix_length(f"{title} : {format_rate(calculated_tax.tax_rate)}", 40)
        )
        taxes.append(tax)
    return taxes
