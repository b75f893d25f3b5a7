"""Compensation breakdown and totals."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from offer_letter.calculators.amounts import ZERO, parse_amount, round_js
from offer_letter.calculators.types import (
    BonusField,
    BonusLine,
    CompensationBreakdown,
    CompensationInput,
    LineTotals,
    MonthlySplit,
)
from offer_letter.config import AllocationConfig

logger = logging.getLogger(__name__)


class CompensationCalculator:
    """Turns raw compensation fields into display figures.

    Conventions:
    - Annual = monthly x 12, kept at full precision (no rounding here)
    - Rounding (Math.round style) only for the final total and the
      annual-to-monthly allocation
    - Blank or unparsable amounts count as zero; nothing raises
    - Bonuses are annual amounts and only count when labelled and positive
    - A positive annual override is the final total, as entered
    """

    MONTHS_PER_YEAR = Decimal("12")

    def __init__(self, allocation: AllocationConfig | None = None):
        self.allocation = allocation or AllocationConfig()

    @staticmethod
    def compute_line_totals(basic: Any, hra: Any, special: Any) -> LineTotals:
        """Monthly and annual amounts for basic, HRA and special allowance."""
        months = CompensationCalculator.MONTHS_PER_YEAR
        basic_monthly = parse_amount(basic)
        hra_monthly = parse_amount(hra)
        special_monthly = parse_amount(special)
        fixed_monthly = basic_monthly + hra_monthly + special_monthly

        return LineTotals(
            basic_monthly=basic_monthly,
            basic_annual=basic_monthly * months,
            hra_monthly=hra_monthly,
            hra_annual=hra_monthly * months,
            special_monthly=special_monthly,
            special_annual=special_monthly * months,
            fixed_monthly_total=fixed_monthly,
            fixed_annual_total=fixed_monthly * months,
        )

    @staticmethod
    def build_bonus_lines(bonuses: Iterable[BonusField]) -> tuple[BonusLine, ...]:
        """Parse every bonus entry, flagging the ones that count."""
        lines = []
        for bonus in bonuses:
            amount = parse_amount(bonus.amount)
            lines.append(
                BonusLine(
                    label=bonus.label,
                    annual_amount=amount,
                    included=bool(bonus.label) and amount > 0,
                )
            )
        return tuple(lines)

    @staticmethod
    def sum_included_bonuses(lines: Iterable[BonusLine]) -> Decimal:
        """Sum of the bonus lines flagged as included."""
        total = ZERO
        for line in lines:
            if line.included:
                total += line.annual_amount
        return total

    @staticmethod
    def compute_bonus_total(bonuses: Iterable[BonusField]) -> Decimal:
        """Sum of bonus amounts with a non-empty label and a positive amount."""
        return CompensationCalculator.sum_included_bonuses(
            CompensationCalculator.build_bonus_lines(bonuses)
        )

    @staticmethod
    def compute_grand_total(
        fixed_annual_total: Decimal,
        bonus_annual_total: Decimal,
        annual_override: Any = None,
    ) -> Decimal:
        """Final annual total ("Total CTC(RO)").

        A positive override wins outright and is not reconciled with the
        components. Otherwise the total is the rounded fixed annual amount;
        ``bonus_annual_total`` is shown on its own subtotal line and does
        not enter this figure.
        """
        override = parse_amount(annual_override)
        if override > 0:
            return override
        return round_js(fixed_annual_total)

    def allocate_annual_to_monthly(self, annual_ctc: Any) -> MonthlySplit:
        """Split an annual CTC into monthly basic, HRA and special allowance.

        Basic and HRA are fixed shares of the monthly CTC, each rounded.
        Special allowance takes the rounded remainder, so the three parts
        add up to the rounded monthly CTC. A zero or blank annual figure
        gives a blank split.
        """
        annual = parse_amount(annual_ctc)
        if annual == 0:
            return MonthlySplit()

        monthly = annual / self.MONTHS_PER_YEAR
        basic = round_js(monthly * self.allocation.basic_share)
        hra = round_js(monthly * self.allocation.hra_share)
        special = round_js(monthly - basic - hra)

        logger.debug(
            "Allocated annual CTC %s: basic=%s hra=%s special=%s", annual, basic, hra, special
        )
        return MonthlySplit(basic_monthly=basic, hra_monthly=hra, special_monthly=special)

    def breakdown(self, data: CompensationInput) -> CompensationBreakdown:
        """Compute every derived figure for one input snapshot."""
        totals = self.compute_line_totals(
            data.basic_pay_monthly,
            data.house_rent_allowance_monthly,
            data.special_allowance_monthly,
        )
        bonus_lines = self.build_bonus_lines(data.bonuses)
        bonus_total = self.sum_included_bonuses(bonus_lines)
        final_total = self.compute_grand_total(
            totals.fixed_annual_total, bonus_total, data.annual_total_override
        )

        return CompensationBreakdown(
            basic_monthly=totals.basic_monthly,
            basic_annual=totals.basic_annual,
            hra_monthly=totals.hra_monthly,
            hra_annual=totals.hra_annual,
            special_monthly=totals.special_monthly,
            special_annual=totals.special_annual,
            fixed_monthly_total=totals.fixed_monthly_total,
            fixed_annual_total=totals.fixed_annual_total,
            bonus_annual_total=bonus_total,
            combined_annual_total=totals.fixed_annual_total + bonus_total,
            final_annual_total=final_total,
            bonus_lines=bonus_lines,
        )
