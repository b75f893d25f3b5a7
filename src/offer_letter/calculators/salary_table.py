"""Salary structure table for the offer letter annexure."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from offer_letter.calculators.amounts import PLACEHOLDER, format_inr
from offer_letter.calculators.compensation import CompensationCalculator
from offer_letter.calculators.types import CompensationBreakdown, CompensationInput


class RowKind(str, Enum):
    """Salary table row kinds."""

    COMPONENT = "COMPONENT"
    FIXED_TOTAL = "FIXED_TOTAL"
    BONUS = "BONUS"
    BONUS_TOTAL = "BONUS_TOTAL"
    GRAND_TOTAL = "GRAND_TOTAL"


@dataclass(frozen=True)
class SalaryRow:
    """One row of the table. Monthly is None for annual-only rows."""

    kind: RowKind
    label: str
    monthly: Decimal | None
    annual: Decimal | None

    @property
    def monthly_display(self) -> str:
        # Annual-only rows leave the monthly column empty rather than dashed
        if self.monthly is None:
            return ""
        return format_inr(self.monthly)

    @property
    def annual_display(self) -> str:
        return format_inr(self.annual)

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "label": self.label,
            "monthly": None if self.monthly is None else format(self.monthly, "f"),
            "annual": None if self.annual is None else format(self.annual, "f"),
            "monthly_display": self.monthly_display,
            "annual_display": self.annual_display,
        }


@dataclass(frozen=True)
class SalaryTable:
    """The rendered salary structure: header plus ordered rows."""

    employee_name: str
    designation: str
    rows: tuple[SalaryRow, ...] = ()

    TITLE = "SALARY STRUCTURE"

    def row(self, kind: RowKind) -> SalaryRow | None:
        """First row of the given kind, if any."""
        for row in self.rows:
            if row.kind == kind:
                return row
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.TITLE,
            "employee_name": self.employee_name,
            "designation": self.designation,
            "rows": [row.to_dict() for row in self.rows],
        }


class SalaryTableBuilder:
    """Lays out a CompensationBreakdown as table rows.

    Row order:
    1. Basic Pay, House Rent Allowance, Special Allowance
    2. Total Gross Fixed CTC(I)
    3. One row per counted bonus (annual column only)
    4. Total CTC(I+II), only when there are counted bonuses
    5. Total CTC(RO)

    The builder only reads the breakdown; it never adjusts the figures.
    """

    def __init__(self, calculator: CompensationCalculator | None = None):
        self.calculator = calculator or CompensationCalculator()

    def build(
        self,
        data: CompensationInput,
        employee_name: str = "",
        designation: str = "",
    ) -> SalaryTable:
        breakdown = self.calculator.breakdown(data)
        return self.build_from_breakdown(breakdown, employee_name, designation)

    @staticmethod
    def build_from_breakdown(
        breakdown: CompensationBreakdown,
        employee_name: str = "",
        designation: str = "",
    ) -> SalaryTable:
        rows = [
            SalaryRow(RowKind.COMPONENT, "Basic Pay", breakdown.basic_monthly, breakdown.basic_annual),
            SalaryRow(
                RowKind.COMPONENT,
                "House Rent Allowance",
                breakdown.hra_monthly,
                breakdown.hra_annual,
            ),
            SalaryRow(
                RowKind.COMPONENT,
                "Special Allowance",
                breakdown.special_monthly,
                breakdown.special_annual,
            ),
            SalaryRow(
                RowKind.FIXED_TOTAL,
                "Total Gross Fixed CTC(I)",
                breakdown.fixed_monthly_total,
                breakdown.fixed_annual_total,
            ),
        ]

        for line in breakdown.bonus_lines:
            if line.included:
                rows.append(SalaryRow(RowKind.BONUS, line.label, None, line.annual_amount))

        if breakdown.has_bonuses:
            rows.append(
                SalaryRow(
                    RowKind.BONUS_TOTAL,
                    "Total CTC(I+II):",
                    None,
                    breakdown.combined_annual_total,
                )
            )

        rows.append(
            SalaryRow(RowKind.GRAND_TOTAL, "Total CTC(RO):", None, breakdown.final_annual_total)
        )

        return SalaryTable(
            employee_name=employee_name or PLACEHOLDER,
            designation=designation or PLACEHOLDER,
            rows=tuple(rows),
        )
