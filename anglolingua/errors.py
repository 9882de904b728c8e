"""
Error taxonomy for AngloLingua.

None of these are fatal: routes translate them into recoverable responses
(see the exception handlers in anglolingua.main).
"""


class AngloLinguaError(Exception):
    """Base class for all domain errors."""

    status_code = 400
    redirect: str | None = None


class NotFoundError(AngloLinguaError):
    """Unknown lesson or exercise id."""

    status_code = 404


class ValidationFailure(AngloLinguaError):
    """Required form fields are missing."""

    status_code = 422

    def __init__(self, message: str, missing_fields: list[str] | None = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []


class ExternalServiceFailure(AngloLinguaError):
    """The AI chat collaborator is unreachable, misconfigured or raised."""

    status_code = 502


class NotAuthenticated(AngloLinguaError):
    status_code = 401
    redirect = "/auth"


class AccessDenied(AngloLinguaError):
    """Content requires a higher subscription tier."""

    status_code = 403
    redirect = "/paywall"


class HomeworkStateError(AngloLinguaError):
    """Homework action not allowed in the current session state."""

    status_code = 409


class ConversationBusy(AngloLinguaError):
    """A message is already awaiting a response."""

    status_code = 409
