"""FastAPI dependencies for dependency injection."""

from typing import Annotated

from fastapi import Depends

from offer_letter.calculators.compensation import CompensationCalculator
from offer_letter.calculators.salary_table import SalaryTableBuilder
from offer_letter.config import get_settings


def get_calculator() -> CompensationCalculator:
    """Calculator configured with the allocation shares from settings."""
    return CompensationCalculator(allocation=get_settings().allocation)


def get_table_builder(
    calculator: Annotated[CompensationCalculator, Depends(get_calculator)],
) -> SalaryTableBuilder:
    """Salary table builder sharing the request's calculator."""
    return SalaryTableBuilder(calculator)


# Type aliases for cleaner dependency injection
Calculator = Annotated[CompensationCalculator, Depends(get_calculator)]
TableBuilder = Annotated[SalaryTableBuilder, Depends(get_table_builder)]
