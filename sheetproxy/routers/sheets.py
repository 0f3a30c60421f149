from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from sheetproxy.context import get_gateway, require_spreadsheet_id
from sheetproxy.models.common import ErrorResponse
from sheetproxy.result import Err
from sheetproxy.services.sheets import SheetsGateway

router = APIRouter(prefix="/api/sheets", tags=["sheets"])

READ_FAILED = "Failed to retrieve spreadsheet data"
UPDATE_FAILED = "Failed to update spreadsheet data"
INVALID_VALUES = 'Missing or invalid "values" in request body'


def _error(status_code: int, error: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error.model_dump(exclude_none=True))


async def _values_from_body(request: Request) -> list | None:
    """Return the non-empty `values` array from a JSON body, or None."""
    content_type = request.headers.get("content-type", "")
    if content_type.split(";")[0].strip().lower() != "application/json":
        return None
    try:
        payload = await request.json()
    except ValueError:
        return None
    if not isinstance(payload, dict):
        return None
    values = payload.get("values")
    if not isinstance(values, list) or not values:
        return None
    return values


@router.get("/{range:path}")
def read_range(
    range: str,
    spreadsheet_id: str = Depends(require_spreadsheet_id),
    gateway: SheetsGateway = Depends(get_gateway),
):
    result = gateway.read_range(spreadsheet_id, range)
    if isinstance(result, Err):
        return _error(500, ErrorResponse(error=READ_FAILED))
    return JSONResponse(content=result.value.model_dump(by_alias=True, exclude_unset=True))


@router.put("/{range:path}")
async def write_range(
    range: str,
    request: Request,
    spreadsheet_id: str = Depends(require_spreadsheet_id),
    gateway: SheetsGateway = Depends(get_gateway),
):
    values = await _values_from_body(request)
    if values is None:
        return _error(400, ErrorResponse(error=INVALID_VALUES))
    result = await run_in_threadpool(gateway.write_range, spreadsheet_id, range, values)
    if isinstance(result, Err):
        return _error(500, ErrorResponse(error=UPDATE_FAILED, details=str(result.error)))
    return JSONResponse(content=result.value.model_dump(by_alias=True, exclude_unset=True))
