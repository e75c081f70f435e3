"""
Theater Billing Package

Computes customer statements for theater invoices.
Resolves each performance through Play → Genre → Rate and totals the
charges (integer cents) and loyalty credits.
"""

__version__ = "1.0.0"
