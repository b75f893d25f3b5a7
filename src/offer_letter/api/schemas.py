"""Pydantic schemas for API request/response models."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from offer_letter.calculators.types import BonusField, CompensationInput


# ============================================================================
# Request schemas
# ============================================================================


class BonusFieldIn(BaseModel):
    """A bonus entry exactly as typed into the form."""

    label: str = ""
    amount: str = ""


class CompensationRequest(BaseModel):
    """Raw compensation fields. Amounts are unvalidated strings."""

    basic_pay: str = ""
    hra: str = ""
    special_allowance: str = ""
    annual_ctc: str | None = None
    bonuses: list[BonusFieldIn] = Field(default_factory=list)


class AllocationRequest(BaseModel):
    """Annual CTC to split into monthly components."""

    annual_ctc: str = ""


class SalaryTableRequest(CompensationRequest):
    """Compensation fields plus the table header."""

    employee_name: str = ""
    position: str = ""


class OfferLetterRequest(SalaryTableRequest):
    """Full offer letter form."""

    salutation: str = ""
    location: str = ""
    date_of_joining: str = ""
    acceptance_deadline: str = ""
    probation_period: str = ""
    special_clause: str = ""
    signatory_title: str = ""
    signatory_name: str = ""


# ============================================================================
# Response schemas
# ============================================================================


class BonusLineResponse(BaseModel):
    """A parsed bonus entry."""

    model_config = ConfigDict(from_attributes=True)

    label: str
    annual_amount: Decimal
    included: bool


class BreakdownResponse(BaseModel):
    """Derived compensation figures."""

    model_config = ConfigDict(from_attributes=True)

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
    bonus_lines: list[BonusLineResponse]


class AllocationResponse(BaseModel):
    """Monthly split; all None when there was no annual figure."""

    model_config = ConfigDict(from_attributes=True)

    basic_monthly: Decimal | None = None
    hra_monthly: Decimal | None = None
    special_monthly: Decimal | None = None


class SalaryRowResponse(BaseModel):
    """One salary table row with raw and display values."""

    kind: str
    label: str
    monthly: Decimal | None = None
    annual: Decimal | None = None
    monthly_display: str
    annual_display: str


class SalaryTableResponse(BaseModel):
    """Salary structure table."""

    title: str
    employee_name: str
    designation: str
    rows: list[SalaryRowResponse]


class OfferLetterResponse(BaseModel):
    """Result of validating an offer letter for export."""

    filename: str
    table: SalaryTableResponse


class ErrorResponse(BaseModel):
    """Standard error response."""

    detail: str
    code: str | None = None
    missing: list[str] | None = None


# ============================================================================
# Conversions
# ============================================================================


def to_compensation_input(payload: CompensationRequest) -> CompensationInput:
    """Build the calculator input from a request body."""
    return CompensationInput(
        basic_pay_monthly=payload.basic_pay,
        house_rent_allowance_monthly=payload.hra,
        special_allowance_monthly=payload.special_allowance,
        annual_total_override=payload.annual_ctc,
        bonuses=tuple(BonusField(label=b.label, amount=b.amount) for b in payload.bonuses),
    )
