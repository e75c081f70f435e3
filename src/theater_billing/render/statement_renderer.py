"""
Statement Renderer - plain-text statements from StatementData.

All currency formatting happens here; the engine only deals in cents.
"""
from ..engine.models import StatementData


def usd(amount_in_cents: int, currency_symbol: str = '$') -> str:
    """Format integer cents as a currency string, e.g. 173000 -> '$1,730.00'."""
    sign = '-' if amount_in_cents < 0 else ''
    dollars, cents = divmod(abs(amount_in_cents), 100)
    return f"{sign}{currency_symbol}{dollars:,}.{cents:02d}"


def credits_text(credits: int) -> str:
    """Pluralise a credit count, e.g. 1 -> '1 credit', 47 -> '47 credits'."""
    return f"{credits} credit" if credits == 1 else f"{credits} credits"


def render_text(statement: StatementData, currency_symbol: str = '$') -> str:
    """Render a statement in the classic text layout."""
    lines = [f"Statement for {statement.customer}"]
    for line in statement.lines:
        lines.append(
            f"  {line.play_name}: {usd(line.amount, currency_symbol)} ({line.audience} seats)"
        )
    lines.append(f"Amount owed is {usd(statement.total_amount, currency_symbol)}")
    lines.append(f"You earned {credits_text(statement.total_credits)}")
    return "\n".join(lines) + "\n"
