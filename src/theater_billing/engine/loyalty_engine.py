"""
Loyalty Engine - volume credits earned by a single performance.

credits = max(audience - threshold, 0) + audience // extra_volume_factor
where the second term only applies to genres with a factor (comedy, pastoral).
"""
from typing import Mapping, Optional

from .models import Genre, Performance, Play
from .rates import DEFAULT_CREDIT_RATES, CreditRate, check_complete


class LoyaltyEngine:
    """Computes loyalty credits from a credit rate table independent of pricing."""

    def __init__(self, rates: Optional[Mapping[Genre, CreditRate]] = None):
        self.rates = dict(rates if rates is not None else DEFAULT_CREDIT_RATES)
        check_complete(self.rates, 'credit')

    def credits_for(self, performance: Performance, play: Play) -> int:
        """Return loyalty credits for one performance of a play."""
        rate = self.rates[play.genre]
        audience = performance.audience

        result = max(audience - rate.audience_threshold, 0)
        if rate.extra_volume_factor:
            result += audience // rate.extra_volume_factor
        return result
