"""POST /v1/invoices - Invoice totals from caller-supplied transactions"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException

from card_billing.api.v1.schemas import (
    CardInvoiceSchema,
    InvoiceBreakdownRequest,
    InvoiceBreakdownResponse,
    InvoiceTotalRequest,
    InvoiceTotalResponse,
    TransactionSchema,
)
from card_billing.api.dependencies import get_request_id
from card_billing.domain.invoices import ZERO, group_invoices_by_card, total_for_invoice
from card_billing.domain.exceptions import DomainException
from card_billing.domain.models import ReferenceMonth
from card_billing.infrastructure.observability.metrics import invoice_counter, record_rejection
from card_billing.infrastructure.observability.logging import log_invoice_computed

router = APIRouter()


@router.post("/invoices/total", response_model=InvoiceTotalResponse)
def get_invoice_total(request_body: InvoiceTotalRequest, request_id: str = Depends(get_request_id)):
    """
    Sum one card's invoice (or every card's, when card_id is omitted).

    Transactions without a card are never counted.
    """
    try:
        reference_month = ReferenceMonth.parse(request_body.reference_month)
        transactions = [txn.to_domain() for txn in request_body.transactions]
        total = total_for_invoice(transactions, request_body.card_id, reference_month)

    except DomainException as e:
        record_rejection(e)
        logging.warning(f"Rejected invoice request: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    invoice_counter.labels(kind="total").inc()

    return InvoiceTotalResponse(
        card_id=request_body.card_id,
        reference_month=reference_month.token,
        total=total,
    )


@router.post("/invoices/{reference_month}", response_model=InvoiceBreakdownResponse)
def get_invoices_by_card(
    reference_month: str,
    request_body: InvoiceBreakdownRequest,
    request_id: str = Depends(get_request_id),
):
    """
    Break a month down into one invoice per card.

    Returns:
        Per-card totals and their transactions, plus the month's overall total
    """
    start_time = time.time()

    try:
        month = ReferenceMonth.parse(reference_month)
        transactions = [txn.to_domain() for txn in request_body.transactions]
        invoices = group_invoices_by_card(transactions, month)

    except DomainException as e:
        record_rejection(e)
        logging.warning(f"Rejected invoice request: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    total = sum((invoice.total for invoice in invoices.values()), ZERO)

    invoice_counter.labels(kind="by_card").inc()
    duration_ms = (time.time() - start_time) * 1000
    log_invoice_computed(request_id, month.token, len(invoices), str(total), duration_ms)

    return InvoiceBreakdownResponse(
        reference_month=month.token,
        total=total,
        invoices=[
            CardInvoiceSchema(
                card_id=invoice.card_id,
                total=invoice.total,
                transactions=[TransactionSchema.from_domain(txn) for txn in invoice.transactions],
            )
            for invoice in invoices.values()
        ],
    )
