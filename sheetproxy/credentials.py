import json
import logging
from dataclasses import dataclass
from pathlib import Path

from google.oauth2 import service_account
from googleapiclient.discovery import build

from sheetproxy.config import Settings
from sheetproxy.exceptions import CredentialError, CredentialErrorKind

logger = logging.getLogger(__name__)

SHEETS_SCOPES = ["https://www.googleapis.com/auth/spreadsheets"]


@dataclass(frozen=True)
class InlineCredential:
    """Service account JSON supplied directly through configuration."""

    document: str


@dataclass(frozen=True)
class FileCredential:
    """Path to a service account JSON key file, read when credentials are loaded."""

    path: Path


@dataclass(frozen=True)
class Unconfigured:
    pass


CredentialSource = InlineCredential | FileCredential | Unconfigured


def credential_source(settings: Settings) -> CredentialSource:
    """Pick the credential source. Inline JSON wins over a key file path."""
    if settings.google_service_account:
        return InlineCredential(settings.google_service_account)
    if settings.service_account_key_path:
        return FileCredential(Path(settings.service_account_key_path))
    return Unconfigured()


def _load_inline(source: InlineCredential) -> service_account.Credentials:
    try:
        info = json.loads(source.document)
    except json.JSONDecodeError as e:
        raise CredentialError(
            CredentialErrorKind.MALFORMED_INLINE_CREDENTIAL,
            f"GOOGLE_SERVICE_ACCOUNT is not valid JSON: {e}",
        ) from e
    if not isinstance(info, dict):
        raise CredentialError(
            CredentialErrorKind.MALFORMED_INLINE_CREDENTIAL,
            "GOOGLE_SERVICE_ACCOUNT must be a JSON object",
        )
    try:
        return service_account.Credentials.from_service_account_info(info, scopes=SHEETS_SCOPES)
    except ValueError as e:
        raise CredentialError(
            CredentialErrorKind.MALFORMED_INLINE_CREDENTIAL,
            f"GOOGLE_SERVICE_ACCOUNT is not a usable service account: {e}",
        ) from e


def _load_file(source: FileCredential) -> service_account.Credentials:
    try:
        return service_account.Credentials.from_service_account_file(str(source.path), scopes=SHEETS_SCOPES)
    except (OSError, ValueError) as e:
        raise CredentialError(
            CredentialErrorKind.FILE_UNAVAILABLE,
            f"Service account key file {source.path} could not be loaded: {e}",
        ) from e


def load_credentials(source: CredentialSource) -> service_account.Credentials:
    if isinstance(source, InlineCredential):
        return _load_inline(source)
    if isinstance(source, FileCredential):
        return _load_file(source)
    raise CredentialError(
        CredentialErrorKind.NO_CREDENTIAL_CONFIGURED,
        "No credentials configured. Set GOOGLE_SERVICE_ACCOUNT or SERVICE_ACCOUNT_KEY_PATH.",
    )


class CredentialResolver:
    """Resolves a credential source into an authenticated Sheets client.

    Loaded credentials are cached for the process lifetime. Call invalidate()
    after a failed request so the next call loads them again. A new API
    resource is built on every resolve() since googleapiclient resources are
    not safe to share between threads.
    """

    def __init__(self, source: CredentialSource):
        self.source = source
        self._credentials: service_account.Credentials | None = None

    def resolve(self):
        credentials = self._credentials
        if credentials is None:
            credentials = load_credentials(self.source)
            logger.info("Loaded service account credentials (%s)", type(self.source).__name__)
            self._credentials = credentials
        return build("sheets", "v4", credentials=credentials, cache_discovery=False)

    def invalidate(self) -> None:
        self._credentials = None
