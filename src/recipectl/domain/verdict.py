"""Verdict — the structured outcome of one recipe run.

Only the first failure of a run is reported; a successful verdict
carries no failure locus.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel


class FailureKind(StrEnum):
    """Why a recipe run failed."""

    CONTENT_MISMATCH = "content_mismatch"
    ROW_SHORTFALL = "row_shortfall"
    UNKNOWN_VALIDATOR = "unknown_validator"
    INVALID_CONFIG = "invalid_config"
    VALIDATOR_ERROR = "validator_error"


class Verdict(BaseModel):
    """Pass/fail result of validating an output file against a recipe.

    Attributes:
        success: Whether every layout matched all of its rows.
        failure: Failure classification, None on success.
        failed_at_row: Absolute 1-based line number of the failure.
        expected_kind: Kind of the layout being validated at failure.
        expected_name: Name of the layout being validated at failure.
        expected_row_count: Rows the failing layout declares.
        observed_row_count: Rows of the failing layout consumed before
            the input ran out (row shortfall only).
        unknown_name: Unresolved kind/type name (unknown validator only).
        rows_validated: Lines that passed validation during the run.
        message: Human-readable description of the failure.
    """

    model_config = {"frozen": True}

    success: bool
    failure: FailureKind | None = None
    failed_at_row: int | None = None
    expected_kind: str | None = None
    expected_name: str | None = None
    expected_row_count: int | None = None
    observed_row_count: int | None = None
    unknown_name: str | None = None
    rows_validated: int = 0
    message: str = ""

    @classmethod
    def passed(cls, rows_validated: int) -> Verdict:
        return cls(success=True, rows_validated=rows_validated)
