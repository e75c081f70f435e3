"""
Invoice aggregation - builds StatementData for an invoice.

Resolution order per performance:
1. Look up the play in the catalog (UnknownPlayError if absent)
2. Price it with the PricingEngine
3. Score credits with the LoyaltyEngine
4. Add both to the running totals and emit one line

Errors propagate on the first failing performance, so a statement is
either complete or not returned at all.
"""
from typing import Optional

from .catalog import PlayCatalog
from .loyalty_engine import LoyaltyEngine
from .models import Invoice, StatementData, StatementLine
from .pricing_engine import PricingEngine


def compute_statement(
    invoice: Invoice,
    catalog: PlayCatalog,
    pricing: Optional[PricingEngine] = None,
    loyalty: Optional[LoyaltyEngine] = None,
) -> StatementData:
    """
    Compute statement lines and totals for an invoice.

    Args:
        invoice: Customer invoice with ordered performances
        catalog: Catalog resolving every play id on the invoice
        pricing: Optional engine override (default rate table otherwise)
        loyalty: Optional engine override (default rate table otherwise)

    Returns:
        StatementData with one line per performance, in invoice order
    """
    pricing = pricing or PricingEngine()
    loyalty = loyalty or LoyaltyEngine()

    result = StatementData(customer=invoice.customer)
    result.add_trace("Invoice", f"Statement for {invoice.customer}", f"{len(invoice.performances)} performances")

    for performance in invoice.performances:
        play = catalog.lookup(performance.play_id)
        amount, amount_trace = pricing.amount_with_trace(performance, play)
        credits = loyalty.credits_for(performance, play)

        line = StatementLine(
            play_id=performance.play_id,
            play_name=play.name,
            amount=amount,
            audience=performance.audience,
            credits=credits,
        )
        line.add_trace("Play Lookup", "Found play in catalog", f"{play.name} ({play.type})")
        for step, desc, val in amount_trace:
            line.add_trace(step, desc, val)
        line.add_trace("Credits", f"Volume credits for {performance.audience} seats", str(credits))

        result.lines.append(line)
        result.total_amount += amount
        result.total_credits += credits

    result.add_trace("Total Amount", "Sum of line amounts", f"{result.total_amount} cents")
    result.add_trace("Total Credits", "Sum of line credits", str(result.total_credits))
    return result
