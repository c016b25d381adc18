"""POST /v1/reference-month and /v1/split - billing cycle and amount split previews"""

import logging
from fastapi import APIRouter, Depends, HTTPException

from card_billing.api.v1.schemas import (
    ReferenceMonthRequest,
    ReferenceMonthResponse,
    SplitRequest,
    SplitResponse,
)
from card_billing.api.dependencies import get_request_id
from card_billing.config import settings
from card_billing.domain.billing_cycle import resolve_reference_month
from card_billing.domain.installments import split_amount
from card_billing.domain.exceptions import DomainException, InvalidInstallmentCountError
from card_billing.infrastructure.observability.metrics import record_rejection

router = APIRouter()


@router.post("/reference-month", response_model=ReferenceMonthResponse)
def get_reference_month(request_body: ReferenceMonthRequest, request_id: str = Depends(get_request_id)):
    """Resolve which invoice a purchase made on purchase_date is billed under"""
    try:
        reference_month = resolve_reference_month(request_body.purchase_date, request_body.closing_day)

    except DomainException as e:
        record_rejection(e)
        logging.warning(f"Rejected reference month request: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    return ReferenceMonthResponse(
        reference_month=reference_month.token,
        first_day=reference_month.first_day,
    )


@router.post("/split", response_model=SplitResponse)
def split(request_body: SplitRequest, request_id: str = Depends(get_request_id)):
    """Split a total into installment amounts, remainder on the last one"""
    try:
        if request_body.installments > settings.max_installments:
            raise InvalidInstallmentCountError(
                f"At most {settings.max_installments} installments allowed, got {request_body.installments}"
            )

        amounts = split_amount(request_body.amount, request_body.installments)

    except DomainException as e:
        record_rejection(e)
        logging.warning(f"Rejected split request: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    return SplitResponse(total=sum(amounts), amounts=amounts)
