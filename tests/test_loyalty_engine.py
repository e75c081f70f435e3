import pytest
import sys
import os

# Add src to path for internal imports
src_path = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'src')
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from theater_billing.engine import Genre, LoyaltyEngine, Performance, Play, UnknownPlayTypeError
from theater_billing.engine.rates import DEFAULT_CREDIT_RATES, CreditRate


@pytest.fixture
def engine():
    return LoyaltyEngine()


def credits(engine, play_type, audience):
    return engine.credits_for(Performance("x", audience), Play(name="X", type=play_type))


def test_tragedy_credits(engine):
    assert credits(engine, "tragedy", 25) == 0
    assert credits(engine, "tragedy", 35) == 5


def test_comedy_extra_credits(engine):
    """Comedy earns a bonus credit for every five attendees."""
    assert credits(engine, "comedy", 15) == 3
    assert credits(engine, "comedy", 25) == 5
    assert credits(engine, "comedy", 35) == 12


def test_history_credits(engine):
    assert credits(engine, "history", 30) == 0
    assert credits(engine, "history", 53) == 23


def test_pastoral_counts_excess_and_half_audience(engine):
    """Pastoral gets both the excess over 30 and half the audience."""
    assert credits(engine, "pastoral", 40) == 30
    assert credits(engine, "pastoral", 7) == 3


def test_zero_audience_earns_nothing(engine):
    for genre in Genre:
        assert credits(engine, genre.value, 0) == 0


def test_unknown_play_type(engine):
    with pytest.raises(UnknownPlayTypeError):
        credits(engine, "opera", 50)


def test_credit_rates_independent_of_pricing():
    rates = dict(DEFAULT_CREDIT_RATES)
    rates[Genre.HISTORY] = CreditRate(audience_threshold=10)
    engine = LoyaltyEngine(rates)

    assert credits(engine, "history", 15) == 5
    assert credits(engine, "tragedy", 35) == 5


def test_incomplete_rate_table_rejected():
    with pytest.raises(ValueError, match="credit"):
        LoyaltyEngine({Genre.TRAGEDY: CreditRate(audience_threshold=30)})
