from dataclasses import dataclass

from fastapi import Depends, Request

from sheetproxy.config import Settings
from sheetproxy.credentials import CredentialResolver, credential_source
from sheetproxy.exceptions import ConfigurationError
from sheetproxy.services.sheets import SheetsGateway


@dataclass
class AppContext:
    """Process-wide state, built once at startup and stored on app.state."""

    settings: Settings
    gateway: SheetsGateway

    @classmethod
    def from_settings(cls, settings: Settings) -> "AppContext":
        resolver = CredentialResolver(credential_source(settings))
        return cls(settings=settings, gateway=SheetsGateway(resolver))


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_gateway(context: AppContext = Depends(get_context)) -> SheetsGateway:
    return context.gateway


def require_spreadsheet_id(context: AppContext = Depends(get_context)) -> str:
    if not context.settings.spreadsheet_id:
        raise ConfigurationError("Spreadsheet ID not configured")
    return context.settings.spreadsheet_id
