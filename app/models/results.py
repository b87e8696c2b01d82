"""Result types returned by the validator and the lifecycle manager.

Every outcome is a value tagged by ``status`` so callers have to branch on
it; none of these are raised.
"""

from typing import Literal, Union

from pydantic import BaseModel

from app.models.candidate import Candidate, CandidateCreate


class ValidationSuccess(BaseModel):
    status: Literal["valid"] = "valid"
    record: CandidateCreate


class ValidationFailure(BaseModel):
    """Field name (as submitted) mapped to its first violated constraint."""
    status: Literal["invalid"] = "invalid"
    field_errors: dict[str, str]


ValidationResult = Union[ValidationSuccess, ValidationFailure]


class InitializeSuccess(BaseModel):
    status: Literal["ok"] = "ok"
    count: int


class InitializeFailure(BaseModel):
    status: Literal["error"] = "error"
    error: str


InitializeResult = Union[InitializeSuccess, InitializeFailure]


class SubmitSuccess(BaseModel):
    status: Literal["ok"] = "ok"
    record: Candidate


class SubmitFailure(BaseModel):
    status: Literal["invalid"] = "invalid"
    field_errors: dict[str, str]


class SubmitError(BaseModel):
    status: Literal["error"] = "error"
    error: str


SubmitResult = Union[SubmitSuccess, SubmitFailure, SubmitError]


class DeleteSuccess(BaseModel):
    status: Literal["ok"] = "ok"
    id: str


class DeleteDeclined(BaseModel):
    status: Literal["declined"] = "declined"


class DeleteFailure(BaseModel):
    status: Literal["error"] = "error"
    error: str


DeleteResult = Union[DeleteSuccess, DeleteDeclined, DeleteFailure]
