"""Utility functions for brokerage."""

from brokerage.utils.date_parser import parse_date, parse_window_bound
from brokerage.utils.amount_parser import parse_amount
from brokerage.utils.money import round_money

__all__ = ["parse_date", "parse_window_bound", "parse_amount", "round_money"]
