import logging
from decimal import Decimal, ROUND_HALF_UP
from typing import TypeVar
from pydantic import BaseModel, ValidationError

from payment_payload.payload.exceptions import PayloadValidationError

log = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

CENT = Decimal("0.01")

def fix_length(value: str | None, length: int) -> str | None:
    if value is None:
        return None
    return value[:length]

def round_amount(amount) -> Decimal:
    """Round half away from zero to two decimals (10.005 -> 10.01, -10.005 -> -10.01)."""
    if amount is None:
        return Decimal("0.00")
    if not isinstance(amount, Decimal):
        amount = Decimal(str(amount))
    rounded = amount.quantize(CENT, rounding=ROUND_HALF_UP)
    # -0.004 rounds to -0.00
    if rounded.is_zero():
        return rounded.copy_abs()
    return rounded

def format_rate(rate: Decimal) -> str:
    # 19.00 -> "19", 7.50 -> "7.5"
    return format(Decimal(rate).normalize(), "f")

def invalid_properties(error: ValidationError) -> list[str]:
    fields = []
    for detail in error.errors():
        name = ".".join(str(part) for part in detail["loc"]) or "__root__"
        if name not in fields:
            fields.append(name)
    return fields

def create_validated(model: type[ModelT], kind: str, **values) -> ModelT:
    """
    Construct a request model, converting schema failures into PayloadValidationError.

    The failure is logged at critical level before it is raised.
    """
    try:
        return model(**values)
    except ValidationError as e:
        fields = invalid_properties(e)
        log.critical(f"{kind} payload invalid: {fields}")
        raise PayloadValidationError(kind, fields) from e
