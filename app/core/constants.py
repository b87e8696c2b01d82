"""Application constants.

Contains the candidate collection name, the per-field length bounds of a
candidate record, the default job roles offered by the form, and the
user-facing notification messages.
"""

# ---------------------------------------------------------------------------
# Store
# ---------------------------------------------------------------------------
CANDIDATES_COLLECTION: str = "candidates"

# ---------------------------------------------------------------------------
# Field bounds (inclusive min / max length)
# ---------------------------------------------------------------------------
FULL_NAME_MIN_LENGTH: int = 3
FULL_NAME_MAX_LENGTH: int = 25
ADDRESS_MIN_LENGTH: int = 10
ADDRESS_MAX_LENGTH: int = 120
QUALIFICATION_MIN_LENGTH: int = 2
QUALIFICATION_MAX_LENGTH: int = 120
COMMENTS_MIN_LENGTH: int = 15
COMMENTS_MAX_LENGTH: int = 2000

# ---------------------------------------------------------------------------
# Job roles offered by the form select
# ---------------------------------------------------------------------------
DEFAULT_JOB_ROLES: tuple[str, ...] = (
    "Engineer",
    "Frontend Developer",
    "Backend Developer",
    "Full Stack Developer",
    "Data Scientist",
    "DevOps Engineer",
    "QA Engineer",
    "Product Manager",
    "UI/UX Designer",
)

# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------
REQUIRED_MESSAGE: str = "Required"
INVALID_JOB_ROLE_MESSAGE: str = "Unknown job role"
INVALID_EMAIL_MESSAGE: str = "Invalid email address"
CANDIDATE_ADDED_MESSAGE: str = "Candidate added successfully!"
CANDIDATE_DELETED_MESSAGE: str = "Record deleted successfully!"
ADD_FAILED_MESSAGE: str = "Could not add the candidate"
DELETE_FAILED_MESSAGE: str = "Could not delete the record"
LOAD_FAILED_MESSAGE: str = "Could not load candidates"
