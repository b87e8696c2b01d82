"""Pydantic models for the ``candidates`` collection.

Documents are stored with the camelCase keys the form submits
(``jobRole``, ``fullName``, ...).  Python code uses snake_case attributes
with camelCase aliases; ``id`` is assigned by the store on insert and is
therefore absent from the create model.
"""

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from app.core.constants import (
    ADDRESS_MAX_LENGTH,
    ADDRESS_MIN_LENGTH,
    COMMENTS_MAX_LENGTH,
    COMMENTS_MIN_LENGTH,
    FULL_NAME_MAX_LENGTH,
    FULL_NAME_MIN_LENGTH,
    INVALID_EMAIL_MESSAGE,
    INVALID_JOB_ROLE_MESSAGE,
    QUALIFICATION_MAX_LENGTH,
    QUALIFICATION_MIN_LENGTH,
    REQUIRED_MESSAGE,
)

_ALIASED = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CandidateCreate(BaseModel):
    """Validated form submission, ready to be inserted."""
    model_config = _ALIASED

    job_role: str
    full_name: str = Field(min_length=FULL_NAME_MIN_LENGTH, max_length=FULL_NAME_MAX_LENGTH)
    email: str
    address: str = Field(min_length=ADDRESS_MIN_LENGTH, max_length=ADDRESS_MAX_LENGTH)
    qualification: str = Field(
        min_length=QUALIFICATION_MIN_LENGTH, max_length=QUALIFICATION_MAX_LENGTH
    )
    comments: str = Field(min_length=COMMENTS_MIN_LENGTH, max_length=COMMENTS_MAX_LENGTH)

    @field_validator("job_role")
    @classmethod
    def _check_job_role(cls, value: str, info: ValidationInfo) -> str:
        """Reject empty roles, and roles outside ``context["job_roles"]`` when given."""
        if not value:
            raise PydanticCustomError("required", REQUIRED_MESSAGE)
        roles = (info.context or {}).get("job_roles")
        if roles is not None and value not in roles:
            raise PydanticCustomError("unknown_job_role", INVALID_JOB_ROLE_MESSAGE)
        return value

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: str) -> str:
        """Check address syntax; the submitted string is kept as typed."""
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError as exc:
            raise PydanticCustomError(
                "invalid_email", f"{INVALID_EMAIL_MESSAGE}: {{reason}}", {"reason": str(exc)}
            ) from exc
        return value

    def to_document(self) -> dict[str, str]:
        """Return the store document (camelCase keys)."""
        return self.model_dump(by_alias=True)


class Candidate(BaseModel):
    """Candidate record held in the local list, always carrying its store id.

    Fields are not re-validated: documents read back from the store are
    shown as they were persisted.  Missing or null text columns read as "".
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    job_role: str = ""
    full_name: str = ""
    email: str = ""
    address: str = ""
    qualification: str = ""
    comments: str = ""

    @field_validator(
        "job_role", "full_name", "email", "address", "qualification", "comments",
        mode="before",
    )
    @classmethod
    def _null_as_empty(cls, value: object) -> object:
        return "" if value is None else value

    @classmethod
    def from_create(cls, record_id: str, payload: CandidateCreate) -> "Candidate":
        """Build the stored record from a validated submission and its new id."""
        return cls(id=record_id, **payload.model_dump())


class CandidateRow(BaseModel):
    """One line of the candidates table (``S.No`` is 1-based)."""
    model_config = _ALIASED

    serial: int
    id: str
    full_name: str
    job_role: str
    email: str
    qualification: str
