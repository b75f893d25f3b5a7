"""Offer letter endpoints."""

import logging

from fastapi import APIRouter, status

from offer_letter.api.dependencies import TableBuilder
from offer_letter.api.schemas import (
    ErrorResponse,
    OfferLetterRequest,
    OfferLetterResponse,
    SalaryTableResponse,
)
from offer_letter.calculators.types import BonusField
from offer_letter.services.form_state import (
    OfferLetterData,
    export_filename,
    validate_for_export,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/offer-letters", tags=["offer-letters"])


def to_offer_letter_data(payload: OfferLetterRequest) -> OfferLetterData:
    """Build the form record from a request body."""
    return OfferLetterData(
        salutation=payload.salutation,
        employee_name=payload.employee_name,
        position=payload.position,
        location=payload.location,
        date_of_joining=payload.date_of_joining,
        acceptance_deadline=payload.acceptance_deadline,
        annual_ctc=payload.annual_ctc or "",
        basic_pay=payload.basic_pay,
        hra=payload.hra,
        special_allowance=payload.special_allowance,
        probation_period=payload.probation_period,
        special_clause=payload.special_clause,
        signatory_title=payload.signatory_title,
        signatory_name=payload.signatory_name,
        bonuses=tuple(BonusField(label=b.label, amount=b.amount) for b in payload.bonuses),
    )


@router.post(
    "/validate",
    response_model=OfferLetterResponse,
    status_code=status.HTTP_200_OK,
    responses={422: {"model": ErrorResponse}},
)
async def validate_offer_letter(
    builder: TableBuilder,
    payload: OfferLetterRequest,
) -> OfferLetterResponse:
    """Check required fields and return the export file name and annexure table.

    Missing name, position or joining date gives a 422 with the list of
    missing fields.
    """
    data = to_offer_letter_data(payload)
    validate_for_export(data)

    table = builder.build(
        data.to_compensation_input(),
        employee_name=data.employee_name,
        designation=data.position,
    )
    filename = export_filename(data)
    logger.info("Offer letter ready for export: %s", filename)

    return OfferLetterResponse(
        filename=filename,
        table=SalaryTableResponse.model_validate(table.to_dict()),
    )
