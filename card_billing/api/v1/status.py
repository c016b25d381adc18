"""POST /v1/status - Payment urgency buckets for display"""

from datetime import datetime
from fastapi import APIRouter, Depends

from card_billing.api.v1.schemas import StatusRequest, StatusResponse
from card_billing.api.dependencies import get_clock
from card_billing.config import settings
from card_billing.domain.status import classify_status
from card_billing.infrastructure.observability.metrics import record_classifications

router = APIRouter()


@router.post("/status", response_model=StatusResponse)
def classify(request_body: StatusRequest, clock: datetime = Depends(get_clock)):
    """
    Classify each item as paid, overdue, due-soon or normal.

    All items are evaluated against the same instant: the request's `now`
    when given, otherwise the server clock read once for the whole batch.
    """
    now = request_body.now or clock

    buckets = [
        classify_status(item.status, item.due_date, now, settings.due_soon_days)
        for item in request_body.items
    ]
    record_classifications(buckets)

    return StatusResponse(evaluated_at=now, buckets=[bucket.value for bucket in buckets])
