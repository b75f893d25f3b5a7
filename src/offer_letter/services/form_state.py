"""Offer letter form state with pure, field-keyed updates."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields, replace
from decimal import Decimal

from offer_letter.calculators.compensation import CompensationCalculator
from offer_letter.calculators.types import BonusField, CompensationInput, plain_amount


class UnknownFieldError(Exception):
    """Raised when an update names a field the form does not have."""

    def __init__(self, field_name: str):
        self.field_name = field_name
        super().__init__(f"Unknown offer letter field '{field_name}'")


class BonusIndexError(Exception):
    """Raised when a bonus update or removal targets a missing entry."""

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(f"Bonus index {index} out of range ({count} entries)")


class MissingFieldsError(Exception):
    """Raised when required fields are blank at export time."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            "Please fill in all required fields (name, position, and date of joining). "
            f"Missing: {', '.join(missing)}"
        )


def _default_bonuses() -> tuple[BonusField, ...]:
    return (BonusField(label="Retention Bonus", amount=""),)


@dataclass(frozen=True)
class OfferLetterData:
    """Everything typed into the offer letter form.

    Amounts stay as raw strings; the calculator parses them on read.
    """

    salutation: str = ""
    employee_name: str = ""
    position: str = ""
    location: str = ""
    date_of_joining: str = ""
    acceptance_deadline: str = ""
    annual_ctc: str = ""
    basic_pay: str = ""
    hra: str = ""
    special_allowance: str = ""
    probation_period: str = ""
    special_clause: str = ""
    signatory_title: str = ""
    signatory_name: str = ""
    bonuses: tuple[BonusField, ...] = _default_bonuses()

    def to_compensation_input(self) -> CompensationInput:
        """Snapshot the compensation fields for the calculator."""
        return CompensationInput(
            basic_pay_monthly=self.basic_pay,
            house_rent_allowance_monthly=self.hra,
            special_allowance_monthly=self.special_allowance,
            annual_total_override=self.annual_ctc or None,
            bonuses=self.bonuses,
        )


# Plain text fields that update_field may set. Bonuses have their own reducers.
EDITABLE_FIELDS = frozenset(f.name for f in fields(OfferLetterData) if f.name != "bonuses")

REQUIRED_FIELDS: dict[str, str] = {
    "employee_name": "Employee Name",
    "position": "Position",
    "date_of_joining": "Date of Joining",
}


def _plain_or_blank(amount: Decimal | None) -> str:
    return "" if amount is None else plain_amount(amount)


def update_field(
    data: OfferLetterData,
    field_name: str,
    value: str,
    calculator: CompensationCalculator | None = None,
) -> OfferLetterData:
    """Return a copy of ``data`` with one field changed.

    Changing ``annual_ctc`` also rewrites basic pay, HRA and special
    allowance from the allocator (all blank when the CTC is blank or 0).
    """
    if not isinstance(field_name, str) or field_name not in EDITABLE_FIELDS:
        raise UnknownFieldError(field_name)

    updated = replace(data, **{field_name: value})
    if field_name != "annual_ctc":
        return updated

    split = (calculator or CompensationCalculator()).allocate_annual_to_monthly(value)
    return replace(
        updated,
        basic_pay=_plain_or_blank(split.basic_monthly),
        hra=_plain_or_blank(split.hra_monthly),
        special_allowance=_plain_or_blank(split.special_monthly),
    )


def add_bonus(data: OfferLetterData) -> OfferLetterData:
    """Append an empty bonus entry."""
    return replace(data, bonuses=data.bonuses + (BonusField(),))


def update_bonus(
    data: OfferLetterData,
    index: int,
    label: str | None = None,
    amount: str | None = None,
) -> OfferLetterData:
    """Change the label and/or amount of one bonus entry."""
    _check_bonus_index(data, index)

    current = data.bonuses[index]
    changed = BonusField(
        label=current.label if label is None else label,
        amount=current.amount if amount is None else amount,
    )
    bonuses = data.bonuses[:index] + (changed,) + data.bonuses[index + 1 :]
    return replace(data, bonuses=bonuses)


def remove_bonus(data: OfferLetterData, index: int) -> OfferLetterData:
    """Drop one bonus entry."""
    _check_bonus_index(data, index)
    return replace(data, bonuses=data.bonuses[:index] + data.bonuses[index + 1 :])


def _check_bonus_index(data: OfferLetterData, index: int) -> None:
    if not 0 <= index < len(data.bonuses):
        raise BonusIndexError(index, len(data.bonuses))


def missing_required_fields(data: OfferLetterData) -> list[str]:
    """Labels of required fields that are blank."""
    return [label for name, label in REQUIRED_FIELDS.items() if not getattr(data, name)]


def validate_for_export(data: OfferLetterData) -> None:
    """Raise MissingFieldsError unless name, position and joining date are set."""
    missing = missing_required_fields(data)
    if missing:
        raise MissingFieldsError(missing)


def export_filename(data: OfferLetterData) -> str:
    """File name for the exported letter, e.g. ``Jane_Doe_2025-11-06.pdf``."""
    name = re.sub(r"\s+", "_", data.employee_name)
    joining = data.date_of_joining.replace("/", "-")
    return f"{name}_{joining}.pdf"
