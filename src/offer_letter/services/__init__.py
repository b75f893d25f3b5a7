"""Form state services."""

from offer_letter.services.form_state import (
    BonusIndexError,
    MissingFieldsError,
    OfferLetterData,
    UnknownFieldError,
    add_bonus,
    export_filename,
    remove_bonus,
    update_bonus,
    update_field,
    validate_for_export,
)

__all__ = [
    "BonusIndexError",
    "MissingFieldsError",
    "OfferLetterData",
    "UnknownFieldError",
    "add_bonus",
    "export_filename",
    "remove_bonus",
    "update_bonus",
    "update_field",
    "validate_for_export",
]
