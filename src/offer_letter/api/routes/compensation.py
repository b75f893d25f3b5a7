"""Compensation calculation endpoints."""

from fastapi import APIRouter, status

from offer_letter.api.dependencies import Calculator, TableBuilder
from offer_letter.api.schemas import (
    AllocationRequest,
    AllocationResponse,
    BreakdownResponse,
    CompensationRequest,
    SalaryTableRequest,
    SalaryTableResponse,
    to_compensation_input,
)

router = APIRouter(prefix="/compensation", tags=["compensation"])


@router.post(
    "/breakdown",
    response_model=BreakdownResponse,
    status_code=status.HTTP_200_OK,
)
async def compute_breakdown(
    calculator: Calculator,
    payload: CompensationRequest,
) -> BreakdownResponse:
    """Compute monthly/annual figures, bonus total and final CTC."""
    breakdown = calculator.breakdown(to_compensation_input(payload))
    return BreakdownResponse.model_validate(breakdown)


@router.post(
    "/allocate",
    response_model=AllocationResponse,
    status_code=status.HTTP_200_OK,
)
async def allocate_annual_ctc(
    calculator: Calculator,
    payload: AllocationRequest,
) -> AllocationResponse:
    """Split an annual CTC into monthly basic, HRA and special allowance."""
    split = calculator.allocate_annual_to_monthly(payload.annual_ctc)
    return AllocationResponse.model_validate(split)


@router.post(
    "/table",
    response_model=SalaryTableResponse,
    status_code=status.HTTP_200_OK,
)
async def build_salary_table(
    builder: TableBuilder,
    payload: SalaryTableRequest,
) -> SalaryTableResponse:
    """Lay out the salary structure table with display strings."""
    table = builder.build(
        to_compensation_input(payload),
        employee_name=payload.employee_name,
        designation=payload.position,
    )
    return SalaryTableResponse.model_validate(table.to_dict())
