from contextlib import asynccontextmanager
from fastapi import Depends, FastAPI, HTTPException
from pydantic import BaseModel

from payment_payload.config import settings
from payment_payload.logging_config import get_logger, setup_logging
from payment_payload.payload.exceptions import PayloadValidationError, ReconciliationError
from payment_payload.payload.transaction import TransactionPayloadBuilder
from payment_payload.schemas.context import PaymentSettings, SalesContext
from payment_payload.schemas.customer import CustomerSnapshot
from payment_payload.schemas.order import OrderSnapshot

log = get_logger(__name__)

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    log.info("Payment payload service started")
    yield

app = FastAPI(title="Payment Payload Service", lifespan=lifespan)

class PayloadRequest(BaseModel):
    order: OrderSnapshot
    customer: CustomerSnapshot
    context: SalesContext
    settings: PaymentSettings | None = None

def get_payload_builder() -> TransactionPayloadBuilder:
    return TransactionPayloadBuilder.from_settings(settings)

@app.get("/health")
def health():
    return {"status": "ok"}

@app.post("/transactions/payload")
def build_payload(request: PayloadRequest, builder: TransactionPayloadBuilder = Depends(get_payload_builder)):
    payment_settings = request.settings or settings.payment_settings()

    try:
        payload = builder.build(request.order, request.customer, request.context, payment_settings)
    except PayloadValidationError as e:
        raise HTTPException(
            status_code=422,
            detail={"kind": e.kind, "invalid_properties": e.invalid_properties}
        )
    except ReconciliationError as e:
        raise HTTPException(
            status_code=409,
            detail={
                "error": str(e),
                "line_item_total": str(e.line_item_total),
                "order_total": str(e.order_total)
            }
        )

    return payload.model_dump(mode="json")
