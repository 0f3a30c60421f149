from enum import Enum

from googleapiclient.errors import HttpError
from pydantic import ValidationError


class ConfigurationError(Exception):
    """Raised when required process configuration is missing."""


class CredentialErrorKind(str, Enum):
    MALFORMED_INLINE_CREDENTIAL = "malformed_inline_credential"
    FILE_UNAVAILABLE = "file_unavailable"
    NO_CREDENTIAL_CONFIGURED = "no_credential_configured"


class CredentialError(Exception):
    """Raised when service account credentials cannot be loaded."""

    def __init__(self, kind: CredentialErrorKind, message: str):
        super().__init__(message)
        self.kind = kind


class GatewayError(Exception):
    """A failed call to the Sheets API, carrying the underlying cause."""

    def __init__(self, operation: str, range: str, cause: Exception):
        super().__init__(str(cause))
        self.operation = operation
        self.range = range
        self.cause = cause

    @property
    def category(self) -> str:
        if isinstance(self.cause, CredentialError):
            return "credential"
        if isinstance(self.cause, HttpError):
            if self.cause.resp.status in (401, 403):
                return "auth"
            if self.cause.resp.status == 429:
                return "rate_limit"
            return "remote"
        if isinstance(self.cause, ValidationError):
            return "remote"
        return "transport"
