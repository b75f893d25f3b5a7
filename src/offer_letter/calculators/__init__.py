"""Compensation calculation core."""

from offer_letter.calculators.amounts import format_inr, parse_amount, round_js
from offer_letter.calculators.compensation import CompensationCalculator
from offer_letter.calculators.salary_table import SalaryTable, SalaryTableBuilder

__all__ = [
    "CompensationCalculator",
    "SalaryTable",
    "SalaryTableBuilder",
    "format_inr",
    "parse_amount",
    "round_js",
]
