from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Remote payloads keep the Sheets API's camelCase keys when relayed.
_REMOTE_CONFIG = ConfigDict(extra="allow", populate_by_name=True)


class ValueRange(BaseModel):
    model_config = _REMOTE_CONFIG

    range: str | None = None
    major_dimension: str | None = Field(default=None, alias="majorDimension")
    values: list[list[Any]] | None = None


class UpdateValuesResponse(BaseModel):
    model_config = _REMOTE_CONFIG

    spreadsheet_id: str | None = Field(default=None, alias="spreadsheetId")
    updated_range: str | None = Field(default=None, alias="updatedRange")
    updated_rows: int | None = Field(default=None, alias="updatedRows")
    updated_columns: int | None = Field(default=None, alias="updatedColumns")
    updated_cells: int | None = Field(default=None, alias="updatedCells")
