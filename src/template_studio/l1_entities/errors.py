"""Domain error types.

Three families: ``ValidationError`` (user input the caller can correct and
retry), ``StateError`` (an illegal lifecycle transition), and
``InternalConsistencyError`` (a registry/builder mismatch; log it, don't retry).
"""

from __future__ import annotations


class TemplateStudioError(Exception):
    """Base class for every error raised by the core."""


# --- Validation ---


class ValidationError(TemplateStudioError):
    """Raised when user-supplied data fails validation."""


class TemplateInvalidError(ValidationError):
    """Raised when a custom template cannot be created or updated."""


class AnswerValidationError(ValidationError):
    """Raised when an answer does not fit its question."""

    def __init__(self, question_id: str, message: str) -> None:
        super().__init__(f"Answer for '{question_id}': {message}")
        self.question_id = question_id


class MissingRequiredAnswerError(ValidationError):
    """Raised by finalize when required questions are still unanswered."""

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f'Missing required answers: {", ".join(missing)}')
        self.missing = missing


class UploadRejectedError(ValidationError):
    """Raised when a file fails the pre-upload checks."""


# --- State ---


class StateError(TemplateStudioError):
    """Raised on an illegal session transition."""


class SessionClosedError(StateError):
    """Raised when mutating a session that is already completed or failed."""

    def __init__(self, session_id: str, status: str) -> None:
        super().__init__(f"Session '{session_id}' is {status}")
        self.session_id = session_id
        self.status = status


class EmptySessionError(StateError):
    """Raised when completing a session that has no generated assets."""


class DuplicateAssetError(StateError):
    """Raised when an asset id is recorded twice in one session."""


# --- Internal consistency ---


class InternalConsistencyError(TemplateStudioError):
    """Raised when components disagree in a way user input cannot explain."""


class UnresolvedPlaceholderError(InternalConsistencyError):
    """Raised when a prompt placeholder has no answer after finalize passed."""

    def __init__(self, template_id: str, placeholder: str) -> None:
        super().__init__(f"Template '{template_id}': placeholder '{{{placeholder}}}' has no answer")
        self.template_id = template_id
        self.placeholder = placeholder


# --- Lookup ---


class TemplateNotFoundError(TemplateStudioError):
    """Raised when a template id is unknown."""


class SessionNotFoundError(TemplateStudioError):
    """Raised when a session id is unknown or owned by another user."""
