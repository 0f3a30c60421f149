import logging
from typing import Any

from sheetproxy.credentials import CredentialResolver
from sheetproxy.exceptions import GatewayError
from sheetproxy.models.sheets import UpdateValuesResponse, ValueRange
from sheetproxy.result import Err, Ok, Result

logger = logging.getLogger(__name__)

VALUE_INPUT_OPTION = "USER_ENTERED"


class SheetsGateway:
    """Reads and writes cell ranges through the Sheets v4 values API.

    Every operation makes exactly one remote call and never retries. Failures
    come back as Err instead of raising.
    """

    def __init__(self, resolver: CredentialResolver):
        self.resolver = resolver

    def _fail(self, operation: str, range: str, cause: Exception) -> Err:
        error = GatewayError(operation, range, cause)
        logger.error("Sheets %s of %r failed (%s): %s", operation, range, error.category, cause)
        # Next call loads fresh credentials
        self.resolver.invalidate()
        return Err(error)

    def read_range(self, spreadsheet_id: str, range: str) -> Result[ValueRange]:
        """Read a range of cells (e.g. 'Sheet1!A1:D10')."""
        try:
            service = self.resolver.resolve()
            result = service.spreadsheets().values().get(
                spreadsheetId=spreadsheet_id, range=range
            ).execute()
            value_range = ValueRange.model_validate(result)
        except Exception as e:
            return self._fail("read", range, e)
        return Ok(value_range)

    def write_range(self, spreadsheet_id: str, range: str, values: list[list[Any]]) -> Result[UpdateValuesResponse]:
        """Write values to a range, letting Sheets parse them as if typed by a user."""
        try:
            service = self.resolver.resolve()
            result = service.spreadsheets().values().update(
                spreadsheetId=spreadsheet_id,
                range=range,
                valueInputOption=VALUE_INPUT_OPTION,
                body={"values": values},
            ).execute()
            summary = UpdateValuesResponse.model_validate(result)
        except Exception as e:
            return self._fail("update", range, e)
        return Ok(summary)
