#!/usr/bin/env python
"""
Print customer statements for every invoice.

Usage:
    python scripts/print_statement.py
    python scripts/print_statement.py --plays plays.csv --invoices invoices.json --trace
    python scripts/print_statement.py --json
"""
import argparse
import json
import sys
from pathlib import Path

# Add src to path
src_path = Path(__file__).parent.parent / 'src'
sys.path.insert(0, str(src_path))

from theater_billing.config.settings import get_settings
from theater_billing.data.loaders import load_invoices, load_plays
from theater_billing.engine import BillingError, LoyaltyEngine, PricingEngine, compute_statement
from theater_billing.engine.rates import load_rates
from theater_billing.render.statement_renderer import render_text


def main(argv=None) -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Print theater billing statements.")
    parser.add_argument('--plays', type=Path, default=settings.plays_file)
    parser.add_argument('--invoices', type=Path, default=settings.invoices_file)
    parser.add_argument('--rates', type=Path, default=settings.rates_file)
    parser.add_argument('--json', action='store_true', help="Print statement data as JSON (cents)")
    parser.add_argument('--trace', action='store_true', help="Print the computation trace")
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args(argv)

    catalog = load_plays(args.plays, verbose=args.verbose)
    invoices = load_invoices(args.invoices, verbose=args.verbose)

    try:
        pricing, loyalty = PricingEngine(), LoyaltyEngine()
        if args.rates:
            pricing_rates, credit_rates = load_rates(args.rates)
            pricing, loyalty = PricingEngine(pricing_rates), LoyaltyEngine(credit_rates)

        statements = [compute_statement(inv, catalog, pricing, loyalty) for inv in invoices]
    except BillingError as e:
        print(f"cannot produce statement: {e}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps([s.to_dict() for s in statements], indent=2))
        return 0

    for statement in statements:
        print(render_text(statement, settings.currency_symbol), end='')
        if args.trace:
            print(statement.get_trace_text())
        print()
    return 0


if __name__ == "__main__":
    sys.exit(main())
