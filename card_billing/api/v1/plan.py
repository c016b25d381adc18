"""POST /v1/plan - Build an installment plan for a card purchase"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException

from card_billing.api.v1.schemas import PlanRequest, PlanResponse, PlanInstallmentSchema
from card_billing.api.dependencies import get_request_id
from card_billing.config import settings
from card_billing.domain.installments import build_installment_plan, plan_to_transactions
from card_billing.domain.exceptions import DomainException, InvalidInstallmentCountError
from card_billing.infrastructure.observability.metrics import record_plan, record_rejection
from card_billing.infrastructure.observability.logging import log_plan_built

router = APIRouter()


@router.post("/plan", response_model=PlanResponse)
def create_plan(request_body: PlanRequest, request_id: str = Depends(get_request_id)):
    """
    Build the installment schedule of a card purchase.

    Flow:
    1. Resolve the first invoice from the card's closing day
    2. Split the amount, remainder on the last installment
    3. Tag each installment with its invoice month and due date
    4. Describe each installment as "<description> (i/n)" under one group id

    Nothing is persisted: the caller stores the returned installments.
    """
    start_time = time.time()

    try:
        if request_body.installments > settings.max_installments:
            raise InvalidInstallmentCountError(
                f"At most {settings.max_installments} installments allowed, got {request_body.installments}"
            )

        installments = build_installment_plan(
            request_body.amount,
            request_body.installments,
            request_body.purchase_date,
            request_body.closing_day,
            request_body.due_day,
        )
        transactions = plan_to_transactions(
            installments,
            card_id=request_body.card_id,
            description=request_body.description,
        )

    except DomainException as e:
        record_rejection(e)
        logging.warning(f"Rejected plan request: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    total = sum(inst.amount for inst in installments)
    first_reference_month = installments[0].reference_month.token

    duration_ms = (time.time() - start_time) * 1000
    record_plan(len(installments))
    log_plan_built(
        request_id,
        request_body.card_id,
        len(installments),
        str(total),
        first_reference_month,
        duration_ms,
    )

    return PlanResponse(
        group_id=transactions[0].installment_group_id,
        card_id=request_body.card_id,
        currency=settings.currency,
        total=total,
        first_reference_month=first_reference_month,
        installments=[
            PlanInstallmentSchema(
                number=inst.number,
                label=inst.label,
                amount=inst.amount,
                purchase_date=inst.purchase_date,
                reference_month=inst.reference_month.token,
                due_date=inst.due_date,
                description=txn.description,
            )
            for inst, txn in zip(installments, transactions)
        ],
    )
