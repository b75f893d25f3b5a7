"""Pytest fixtures for offer letter tests."""

from __future__ import annotations

import pytest

from offer_letter.calculators.compensation import CompensationCalculator
from offer_letter.calculators.salary_table import SalaryTableBuilder
from offer_letter.calculators.types import BonusField, CompensationInput
from offer_letter.config import AllocationConfig


@pytest.fixture
def calculator() -> CompensationCalculator:
    """Calculator with the default allocation shares."""
    return CompensationCalculator(AllocationConfig())


@pytest.fixture
def table_builder(calculator: CompensationCalculator) -> SalaryTableBuilder:
    return SalaryTableBuilder(calculator)


@pytest.fixture
def consultant_input() -> CompensationInput:
    """Monthly components typed into the form, no override, no bonuses."""
    return CompensationInput(
        basic_pay_monthly="30000",
        house_rent_allowance_monthly="9666",
        special_allowance_monthly="14500",
    )


@pytest.fixture
def mixed_bonuses() -> tuple[BonusField, ...]:
    """One unlabelled, one zero, one valid bonus."""
    return (
        BonusField(label="", amount="500"),
        BonusField(label="X", amount="0"),
        BonusField(label="Y", amount="1000"),
    )
