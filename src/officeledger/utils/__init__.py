"""Utility functions for officeledger."""

from officeledger.utils.date_parser import coerce_date, parse_date
from officeledger.utils.amount_parser import format_amount, parse_amount

__all__ = ["parse_date", "coerce_date", "parse_amount", "format_amount"]
