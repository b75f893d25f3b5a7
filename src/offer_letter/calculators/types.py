"""Type definitions for the compensation calculation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any


def plain_amount(amount: Decimal) -> str:
    """Render a Decimal without exponent notation."""
    return format(amount, "f")


@dataclass(frozen=True)
class BonusField:
    """A bonus entry as typed into the form (raw strings)."""

    label: str = ""
    amount: str = ""


@dataclass(frozen=True)
class CompensationInput:
    """Raw compensation fields, one snapshot per form change."""

    basic_pay_monthly: str = ""
    house_rent_allowance_monthly: str = ""
    special_allowance_monthly: str = ""
    annual_total_override: str | None = None
    bonuses: tuple[BonusField, ...] = ()


@dataclass(frozen=True)
class BonusLine:
    """A parsed bonus entry.

    Every entry is kept; ``included`` marks the ones that count towards
    the bonus total (non-empty label and a positive amount).
    """

    label: str
    annual_amount: Decimal
    included: bool


@dataclass(frozen=True)
class LineTotals:
    """Monthly and annual amounts for the three fixed components."""

    basic_monthly: Decimal
    basic_annual: Decimal
    hra_monthly: Decimal
    hra_annual: Decimal
    special_monthly: Decimal
    special_annual: Decimal
    fixed_monthly_total: Decimal
    fixed_annual_total: Decimal


@dataclass(frozen=True)
class CompensationBreakdown:
    """Derived compensation figures. Recomputed on demand, never stored."""

    basic_monthly: Decimal
    basic_annual: Decimal
    hra_monthly: Decimal
    hra_annual: Decimal
    special_monthly: Decimal
    special_annual: Decimal
    fixed_monthly_total: Decimal
    fixed_annual_total: Decimal
    bonus_annual_total: Decimal
    combined_annual_total: Decimal
    final_annual_total: Decimal
    bonus_lines: tuple[BonusLine, ...] = field(default_factory=tuple)

    @property
    def has_bonuses(self) -> bool:
        return self.bonus_annual_total > 0

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly dict (amounts as strings)."""
        return {
            "basic_monthly": plain_amount(self.basic_monthly),
            "basic_annual": plain_amount(self.basic_annual),
            "hra_monthly": plain_amount(self.hra_monthly),
            "hra_annual": plain_amount(self.hra_annual),
            "special_monthly": plain_amount(self.special_monthly),
            "special_annual": plain_amount(self.special_annual),
            "fixed_monthly_total": plain_amount(self.fixed_monthly_total),
            "fixed_annual_total": plain_amount(self.fixed_annual_total),
            "bonus_annual_total": plain_amount(self.bonus_annual_total),
            "combined_annual_total": plain_amount(self.combined_annual_total),
            "final_annual_total": plain_amount(self.final_annual_total),
            "bonus_lines": [
                {
                    "label": line.label,
                    "annual_amount": plain_amount(line.annual_amount),
                    "included": line.included,
                }
                for line in self.bonus_lines
            ],
        }


@dataclass(frozen=True)
class MonthlySplit:
    """Monthly fixed components derived from an annual CTC.

    All three fields are None when there is no annual figure to split.
    """

    basic_monthly: Decimal | None = None
    hra_monthly: Decimal | None = None
    special_monthly: Decimal | None = None

    @property
    def is_blank(self) -> bool:
        return self.basic_monthly is None

    @property
    def total(self) -> Decimal | None:
        if self.is_blank:
            return None
        return self.basic_monthly + self.hra_monthly + self.special_monthly
