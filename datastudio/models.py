from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

CellValueModel = Union[str, int, float, bool, None]


class Header(BaseModel):
    name: str
    # Informational only; no conversion looks at it.
    type: Optional[str] = None


class TableResponse(BaseModel):
    headers: List[Header] = Field(default_factory=list)
    data: List[Dict[str, CellValueModel]] = Field(default_factory=list)


class GenerateRequest(BaseModel):
    headers: List[str] = Field(default_factory=list)
    rowCount: Optional[int] = Field(default=None, ge=0, examples=[5])


class AddHeaderRequest(BaseModel):
    name: str


class UpdateCellRequest(BaseModel):
    rowIndex: int
    header: str
    value: CellValueModel = ""


class HealthResponse(BaseModel):
    ok: bool = True
