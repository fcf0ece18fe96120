"""
Response envelope for the play endpoints.

Every play endpoint answers with an ApiResponse so the front end can tell
a scored submission apart from a rejected move or a server fault without
inspecting status codes.

Outcome types:
- Success: the request was processed (a rejected submission is still a
  success; the rejection lives in the payload)
- Refusal: the request broke a game invariant (cards or claimed counts that
  are not part of the puzzle)
- KnownFailure: bad input or a missing puzzle
- UnknownFailure: anything else

All play responses leave through `finalize_response()`.
"""

from enum import Enum
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, PrivateAttr


class FailureKind(str, Enum):
    """Classification of failure types."""

    # Input validation failures
    INVALID_INPUT = "invalid_input"

    # Resource failures
    NOT_FOUND = "not_found"

    # Game rule violations
    INVALID_MOVE = "invalid_move"
    CARD_CONSERVATION = "card_conservation"
    INVALID_CLAIM = "invalid_claim"

    # Unknown
    UNKNOWN = "unknown"


class OutcomeType(str, Enum):
    """High-level outcome classification."""

    SUCCESS = "success"
    REFUSAL = "refusal"
    KNOWN_FAILURE = "known_failure"
    UNKNOWN_FAILURE = "unknown_failure"


T = TypeVar("T")


class FailureDetail(BaseModel):
    """Detailed information about a failure."""

    kind: FailureKind = Field(
        ...,
        description="Classification of the failure",
    )
    message: str = Field(
        ...,
        description="Player-facing explanation of what went wrong",
    )
    detail: str | None = Field(
        default=None,
        description="Additional technical detail (optional)",
    )
    suggestion: str | None = Field(
        default=None,
        description="Suggested action for the player",
    )


class ApiResponse(BaseModel, Generic[T]):
    """Envelope shared by the play endpoints."""

    outcome: OutcomeType = Field(
        ...,
        description="High-level classification of the result",
    )
    data: T | None = Field(
        default=None,
        description="Response data (present on success)",
    )
    failure: FailureDetail | None = Field(
        default=None,
        description="Failure details (present on non-success)",
    )

    _finalized: bool = PrivateAttr(default=False)

    @classmethod
    def refusal(
        cls,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> "ApiResponse[Any]":
        """Create a refusal response."""
        return cls(
            outcome=OutcomeType.REFUSAL,
            failure=FailureDetail(
                kind=kind,
                message=message,
                detail=detail,
                suggestion=suggestion,
            ),
        )

    @classmethod
    def known_failure(
        cls,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ) -> "ApiResponse[Any]":
        """Create a known failure response."""
        return cls(
            outcome=OutcomeType.KNOWN_FAILURE,
            failure=FailureDetail(
                kind=kind,
                message=message,
                detail=detail,
                suggestion=suggestion,
            ),
        )


class KnownError(Exception):
    """
    Base class for failures the game can explain.

    Subclasses carry the failure kind and the HTTP status used when the
    error is raised outside an enveloped endpoint.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        self.status_code = status_code
        super().__init__(message)

    def to_response(self) -> ApiResponse[Any]:
        """Convert to a finalized ApiResponse."""
        return finalize_response(
            ApiResponse.known_failure(
                kind=self.kind,
                message=self.message,
                detail=self.detail,
                suggestion=self.suggestion,
            )
        )


class RefusalError(Exception):
    """Raised when a request breaks a game invariant."""

    def __init__(
        self,
        kind: FailureKind,
        message: str,
        detail: str | None = None,
        suggestion: str | None = None,
    ):
        self.kind = kind
        self.message = message
        self.detail = detail
        self.suggestion = suggestion
        super().__init__(message)

    def to_response(self) -> ApiResponse[Any]:
        """Convert to a finalized ApiResponse."""
        return finalize_response(
            ApiResponse.refusal(
                kind=self.kind,
                message=self.message,
                detail=self.detail,
                suggestion=self.suggestion,
            )
        )


class PuzzleNotFoundError(KnownError):
    """Raised when no puzzle exists for the requested date."""

    def __init__(self, date: str):
        self.date = date
        super().__init__(
            kind=FailureKind.NOT_FOUND,
            message="No Puzzle for this date",
            detail=f"date={date}",
            suggestion="Pick another date from the archive.",
            status_code=404,
        )


# =============================================================================
# RESPONSE BOUNDARY
# =============================================================================

UNKNOWN_FAILURE_MESSAGE = "Something went wrong. Try again in a moment."
UNKNOWN_FAILURE_SUGGESTION = "If this persists, please report the issue."


def finalize_response(response: ApiResponse[Any]) -> ApiResponse[Any]:
    """
    Finalize a response at the play boundary.

    Raises:
        ValueError: If the outcome and failure fields disagree
    """
    if response.outcome == OutcomeType.SUCCESS:
        if response.failure is not None:
            raise ValueError("Success response must not have failure details")
    else:
        if response.failure is None:
            raise ValueError(f"{response.outcome.value} response must have failure details")

    response._finalized = True

    return response


def is_finalized(response: ApiResponse[Any]) -> bool:
    """Check whether a response passed through finalize_response."""
    return response._finalized


def create_unknown_failure(exception: Exception) -> ApiResponse[Any]:
    """
    Create a finalized unknown failure from an exception.

    Only the exception type is exposed, never its message.
    """
    response: ApiResponse[Any] = ApiResponse(
        outcome=OutcomeType.UNKNOWN_FAILURE,
        failure=FailureDetail(
            kind=FailureKind.UNKNOWN,
            message=UNKNOWN_FAILURE_MESSAGE,
            detail=type(exception).__name__,
            suggestion=UNKNOWN_FAILURE_SUGGESTION,
        ),
    )

    return finalize_response(response)


def create_success(data: T) -> ApiResponse[T]:
    """Create a finalized success response."""
    response = ApiResponse[T](outcome=OutcomeType.SUCCESS, data=data)
    finalize_response(response)
    return response
