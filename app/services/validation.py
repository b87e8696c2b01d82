"""Candidate form validation.

Checks a raw submission against ``CandidateCreate`` and returns a tagged
result instead of raising.  Every field is checked; only the first message
per field is kept.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import ValidationError

from app.core.config import settings
from app.core.constants import REQUIRED_MESSAGE
from app.models.candidate import CandidateCreate
from app.models.results import ValidationFailure, ValidationResult, ValidationSuccess

# Python attribute name -> submitted (camelCase) field name
_FIELD_ALIASES: dict[str, str] = {
    name: field.alias or name for name, field in CandidateCreate.model_fields.items()
}


def _field_errors(exc: ValidationError) -> dict[str, str]:
    errors: dict[str, str] = {}
    for error in exc.errors():
        loc = error["loc"]
        if not loc:
            continue
        field = _FIELD_ALIASES.get(str(loc[0]), str(loc[0]))
        if field in errors:
            continue
        errors[field] = REQUIRED_MESSAGE if error["type"] == "missing" else error["msg"]
    return errors


def validate_candidate(
    raw: Mapping[str, Any],
    job_roles: Iterable[str] | None = None,
) -> ValidationResult:
    """Validate a raw form submission.

    Parameters
    ----------
    raw:
        Field name to submitted value, keyed by the camelCase form names
        (``jobRole``, ``fullName``, ``email``, ``address``,
        ``qualification``, ``comments``).  Unknown keys are ignored.
    job_roles:
        Allowed job roles.  Defaults to ``settings.job_roles``.

    Returns
    -------
    ``ValidationSuccess`` carrying the typed record, or
    ``ValidationFailure`` mapping each invalid field to a message.
    """
    roles = frozenset(settings.job_roles if job_roles is None else job_roles)
    try:
        record = CandidateCreate.model_validate(dict(raw), context={"job_roles": roles})
    except ValidationError as exc:
        return ValidationFailure(field_errors=_field_errors(exc))
    return ValidationSuccess(record=record)
