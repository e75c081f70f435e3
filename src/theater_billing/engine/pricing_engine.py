"""
Pricing Engine - resolves the charge for a single performance.

Charge pipeline for a performance of audience a:
1. Resolve the play type to a Genre (unknown types fail)
2. Start from the genre's base amount
3. If a exceeds the threshold: add the flat over-threshold amount
   plus the per-person surcharge for every seat above the threshold
4. Add the per-audience amount for every seat
"""
from typing import Mapping, Optional

from .models import Genre, Performance, Play
from .rates import DEFAULT_PRICING_RATES, PricingRate, check_complete


def _cents(amount: int) -> str:
    return f"{amount} cents"


class PricingEngine:
    """Computes performance charges in integer cents."""

    def __init__(self, rates: Optional[Mapping[Genre, PricingRate]] = None):
        self.rates = dict(rates if rates is not None else DEFAULT_PRICING_RATES)
        check_complete(self.rates, 'pricing')

    def amount_for(self, performance: Performance, play: Play) -> int:
        """Return the charge in cents for one performance of a play."""
        amount, _ = self.amount_with_trace(performance, play)
        return amount

    def amount_with_trace(self, performance: Performance, play: Play) -> tuple[int, list]:
        """
        Compute the charge with trace of resolution steps.

        Returns (amount_cents, trace_steps).
        """
        genre = play.genre
        rate = self.rates[genre]
        audience = performance.audience
        trace = []

        amount = rate.base_amount
        trace.append(("Base Amount", f"{genre.value} base", _cents(amount)))

        over = audience - rate.audience_threshold
        if over > 0:
            if rate.over_threshold_amount:
                amount += rate.over_threshold_amount
                trace.append((
                    "Over Threshold",
                    f"Audience above {rate.audience_threshold}",
                    _cents(rate.over_threshold_amount),
                ))
            surcharge = rate.over_threshold_per_person * over
            amount += surcharge
            trace.append((
                "Surcharge",
                f"{over} seats × {rate.over_threshold_per_person}",
                _cents(surcharge),
            ))
        else:
            trace.append(("Surcharge", f"Audience within threshold of {rate.audience_threshold}", None))

        if rate.amount_per_audience:
            per_seat = rate.amount_per_audience * audience
            amount += per_seat
            trace.append((
                "Per Seat",
                f"{audience} seats × {rate.amount_per_audience}",
                _cents(per_seat),
            ))

        return amount, trace
