import pytest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient

from sheetproxy.config import Settings


# --- Canned API responses ---

SPREADSHEET_ID = "sheet123"

VALUES_API_RESPONSE = {
    "range": "Sheet1!A1:B2",
    "majorDimension": "ROWS",
    "values": [["a", "1"], ["b", "2"]],
}

UPDATE_API_RESPONSE = {
    "spreadsheetId": SPREADSHEET_ID,
    "updatedRange": "Sheet1!A1:B2",
    "updatedRows": 2,
    "updatedColumns": 2,
    "updatedCells": 4,
}

INLINE_SERVICE_ACCOUNT = '{"type": "service_account", "client_email": "proxy@example.iam.gserviceaccount.com"}'


def make_settings(**overrides) -> Settings:
    """Settings isolated from the process environment and any .env file."""
    fields = {
        "spreadsheet_id": SPREADSHEET_ID,
        "google_service_account": INLINE_SERVICE_ACCOUNT,
        "service_account_key_path": "",
        "cors_origins": ["*"],
    }
    fields.update(overrides)
    return Settings(_env_file=None, **fields)


def values_api(mock_svc: MagicMock) -> MagicMock:
    """The spreadsheets().values() resource, reached without recording calls."""
    return mock_svc.spreadsheets.return_value.values.return_value


@pytest.fixture
def mock_load_credentials(mocker):
    return mocker.patch("sheetproxy.credentials.load_credentials", return_value=MagicMock())


@pytest.fixture
def mock_sheets_build(mocker):
    mock_svc = MagicMock()
    mocker.patch("sheetproxy.credentials.build", return_value=mock_svc)
    return mock_svc


@pytest.fixture
def mock_sheets_service(mock_load_credentials, mock_sheets_build):
    """Fully mocked Sheets API service."""
    return mock_sheets_build


@pytest.fixture
def api_client():
    """TestClient over an app with a configured spreadsheet id."""
    from sheetproxy.main import create_app
    return TestClient(create_app(make_settings()))
