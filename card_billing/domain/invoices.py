"""Invoice aggregation - card totals per reference month"""

from decimal import Decimal
from typing import Dict, Iterable

from card_billing.domain.models import CardTransaction, InvoiceSummary, ReferenceMonth

ZERO = Decimal("0.00")


def _billed_to_card(txn: CardTransaction, reference_month: ReferenceMonth) -> bool:
    # Cash/account transactions carry no card and never belong to an invoice
    return bool(txn.card_id) and txn.reference_month == reference_month


def total_for_invoice(
    transactions: Iterable[CardTransaction],
    card_id: str | None,
    reference_month: ReferenceMonth | str,
) -> Decimal:
    """
    Sum the transactions billed on one invoice.

    A transaction counts when its reference month matches and it is
    associated with a card. With card_id=None every card's share of the
    month is summed; otherwise only that card's.

    Returns 0.00 for empty input or no matches.
    """
    month = ReferenceMonth.coerce(reference_month)

    return sum(
        (
            txn.amount
            for txn in transactions
            if _billed_to_card(txn, month) and (card_id is None or txn.card_id == card_id)
        ),
        ZERO,
    )


def group_invoices_by_card(
    transactions: Iterable[CardTransaction],
    reference_month: ReferenceMonth | str,
) -> Dict[str, InvoiceSummary]:
    """Break one month down into per-card invoices, in first-seen card order"""
    month = ReferenceMonth.coerce(reference_month)
    invoices: Dict[str, InvoiceSummary] = {}

    for txn in transactions:
        if not _billed_to_card(txn, month):
            continue
        invoice = invoices.setdefault(txn.card_id, InvoiceSummary(card_id=txn.card_id, reference_month=month))
        invoice.transactions.append(txn)
        invoice.total += txn.amount

    return invoices
