"""
Rate tables - per-genre constants for pricing and loyalty credits.

Pricing and credits are keyed independently so either can be tuned
without touching the other. Amounts are integer cents.
"""
import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Mapping

from .models import Genre


# Pricing constants (cents)
TRAGEDY_BASE_AMOUNT = 40000
TRAGEDY_AUDIENCE_THRESHOLD = 30
TRAGEDY_OVER_BASE_CAPACITY_PER_PERSON = 1000

COMEDY_BASE_AMOUNT = 30000
COMEDY_AUDIENCE_THRESHOLD = 20
COMEDY_OVER_BASE_CAPACITY_AMOUNT = 10000
COMEDY_OVER_BASE_CAPACITY_PER_PERSON = 500
COMEDY_AMOUNT_PER_AUDIENCE = 300

HISTORY_BASE_AMOUNT = 20000
HISTORY_AUDIENCE_THRESHOLD = 20
HISTORY_OVER_BASE_CAPACITY_PER_PERSON = 1000

PASTORAL_BASE_AMOUNT = 40000
PASTORAL_AUDIENCE_THRESHOLD = 20
PASTORAL_OVER_BASE_CAPACITY_PER_PERSON = 2500

# Loyalty credit constants
BASE_VOLUME_CREDIT_THRESHOLD = 30
COMEDY_EXTRA_VOLUME_FACTOR = 5
HISTORY_VOLUME_CREDIT_THRESHOLD = 30
PASTORAL_VOLUME_CREDIT_THRESHOLD = 30
PASTORAL_EXTRA_VOLUME_FACTOR = 2


@dataclass(frozen=True)
class PricingRate:
    """Charge rule for one genre."""
    base_amount: int
    audience_threshold: int
    over_threshold_per_person: int
    over_threshold_amount: int = 0  # flat bonus once the threshold is exceeded
    amount_per_audience: int = 0  # charged for every seat, threshold or not


@dataclass(frozen=True)
class CreditRate:
    """Loyalty credit rule for one genre."""
    audience_threshold: int
    extra_volume_factor: int = 0  # 0 = no audience // factor bonus


DEFAULT_PRICING_RATES: dict[Genre, PricingRate] = {
    Genre.TRAGEDY: PricingRate(
        base_amount=TRAGEDY_BASE_AMOUNT,
        audience_threshold=TRAGEDY_AUDIENCE_THRESHOLD,
        over_threshold_per_person=TRAGEDY_OVER_BASE_CAPACITY_PER_PERSON,
    ),
    Genre.COMEDY: PricingRate(
        base_amount=COMEDY_BASE_AMOUNT,
        audience_threshold=COMEDY_AUDIENCE_THRESHOLD,
        over_threshold_per_person=COMEDY_OVER_BASE_CAPACITY_PER_PERSON,
        over_threshold_amount=COMEDY_OVER_BASE_CAPACITY_AMOUNT,
        amount_per_audience=COMEDY_AMOUNT_PER_AUDIENCE,
    ),
    Genre.HISTORY: PricingRate(
        base_amount=HISTORY_BASE_AMOUNT,
        audience_threshold=HISTORY_AUDIENCE_THRESHOLD,
        over_threshold_per_person=HISTORY_OVER_BASE_CAPACITY_PER_PERSON,
    ),
    Genre.PASTORAL: PricingRate(
        base_amount=PASTORAL_BASE_AMOUNT,
        audience_threshold=PASTORAL_AUDIENCE_THRESHOLD,
        over_threshold_per_person=PASTORAL_OVER_BASE_CAPACITY_PER_PERSON,
    ),
}

DEFAULT_CREDIT_RATES: dict[Genre, CreditRate] = {
    Genre.TRAGEDY: CreditRate(audience_threshold=BASE_VOLUME_CREDIT_THRESHOLD),
    Genre.COMEDY: CreditRate(
        audience_threshold=BASE_VOLUME_CREDIT_THRESHOLD,
        extra_volume_factor=COMEDY_EXTRA_VOLUME_FACTOR,
    ),
    Genre.HISTORY: CreditRate(audience_threshold=HISTORY_VOLUME_CREDIT_THRESHOLD),
    Genre.PASTORAL: CreditRate(
        audience_threshold=PASTORAL_VOLUME_CREDIT_THRESHOLD,
        extra_volume_factor=PASTORAL_EXTRA_VOLUME_FACTOR,
    ),
}


def check_complete(rates: Mapping[Genre, object], kind: str) -> None:
    """Raise ValueError unless every genre has a rate."""
    missing = [genre.value for genre in Genre if genre not in rates]
    if missing:
        raise ValueError(f"No {kind} rate configured for: {', '.join(missing)}")


def _merge(defaults: dict, overrides: dict, kind: str) -> dict:
    merged = dict(defaults)
    for play_type, values in overrides.items():
        genre = Genre.of(play_type)
        allowed = {f.name for f in fields(merged[genre])}
        unknown = set(values) - allowed
        if unknown:
            raise ValueError(
                f"Unknown {kind} field(s) for {genre.value}: {', '.join(sorted(unknown))}"
            )
        merged[genre] = replace(merged[genre], **{k: int(v) for k, v in values.items()})
    return merged


def load_rates(path: Path) -> tuple[dict[Genre, PricingRate], dict[Genre, CreditRate]]:
    """
    Load rate overrides from a JSON file and merge them over the defaults.

    File format:
        {"pricing": {"comedy": {"base_amount": 32000}},
         "credits": {"history": {"audience_threshold": 25}}}

    Returns (pricing_rates, credit_rates).
    """
    if not path.exists():
        raise FileNotFoundError(f"Rates file not found at {path}.")

    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    pricing = _merge(DEFAULT_PRICING_RATES, data.get('pricing', {}), 'pricing')
    credits = _merge(DEFAULT_CREDIT_RATES, data.get('credits', {}), 'credit')
    return pricing, credits
