"""Engine subpackage - core pricing, credit and statement logic."""
from .catalog import PlayCatalog
from .errors import BillingError, UnknownPlayError, UnknownPlayTypeError
from .loyalty_engine import LoyaltyEngine
from .models import Genre, Invoice, Performance, Play, StatementData, StatementLine
from .pricing_engine import PricingEngine
from .statement import compute_statement

__all__ = [
    'PlayCatalog',
    'BillingError',
    'UnknownPlayError',
    'UnknownPlayTypeError',
    'LoyaltyEngine',
    'Genre',
    'Invoice',
    'Performance',
    'Play',
    'StatementData',
    'StatementLine',
    'PricingEngine',
    'compute_statement',
]
