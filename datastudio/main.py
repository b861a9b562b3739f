import logging
from typing import List, Optional

from fastapi import Depends, FastAPI, File, HTTPException, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response

from . import formats
from .config import settings
from .errors import TableDataError, UnsupportedFormatError
from .generator import generate
from .models import (
    AddHeaderRequest,
    GenerateRequest,
    HealthResponse,
    Header,
    TableResponse,
    UpdateCellRequest,
)
from .normalize import normalize_rows, rows_from_form, table_headers
from .store import TableStore

logger = logging.getLogger(__name__)

# Global document store
_store: Optional[TableStore] = None


def get_store() -> TableStore:
    """Get the process-wide table store."""
    global _store
    if _store is None:
        _store = TableStore()
    return _store


def _table_response(store: TableStore, fallback: Optional[List[str]] = None) -> TableResponse:
    table = store.get()
    names = table_headers(table) or list(fallback or [])
    return TableResponse(headers=[Header(name=n) for n in names], data=table)


app = FastAPI(
    title="datastudio",
    description="Synthetic test data generation, editing and JSON/CSV/XLSX import/export",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.get("/", response_model=TableResponse)
def index(store: TableStore = Depends(get_store)):
    return _table_response(store, fallback=settings.default_headers)


@app.post("/generate", response_model=TableResponse)
def generate_data(payload: GenerateRequest, store: TableStore = Depends(get_store)):
    row_count = settings.default_row_count if payload.rowCount is None else payload.rowCount
    table = generate(payload.headers, row_count)
    store.replace(table)
    logger.info("Generated %d rows for %d headers", len(table), len(payload.headers))
    return _table_response(store, fallback=payload.headers)


@app.post("/import", response_model=TableResponse)
async def import_file(file: UploadFile = File(...), store: TableStore = Depends(get_store)):
    filename = file.filename or ""
    try:
        fmt = formats.for_filename(filename)
    except UnsupportedFormatError as e:
        logger.warning("Rejected upload %r: %s", filename, e)
        raise HTTPException(status_code=422, detail=str(e))

    raw = await file.read()
    if len(raw) > settings.max_upload_bytes:
        logger.warning("Rejected upload %r: %d bytes", filename, len(raw))
        raise HTTPException(status_code=413, detail=f"File exceeds {settings.max_upload_bytes} bytes")

    try:
        table = normalize_rows(fmt.decode(raw))
    except TableDataError as e:
        logger.warning("Could not import %r: %s", filename, e)
        raise HTTPException(status_code=422, detail=str(e))

    store.replace(table)
    logger.info("Imported %d rows from %r as %s", len(table), filename, fmt.name)
    return _table_response(store)


@app.post("/save-edits", response_model=TableResponse)
async def save_edits(request: Request, store: TableStore = Depends(get_store)):
    form = await request.form()
    try:
        raw_rows = rows_from_form(dict(form))
    except TableDataError as e:
        raise HTTPException(status_code=422, detail=str(e))

    store.replace(normalize_rows(raw_rows))
    logger.info("Saved edited table with %d rows", len(raw_rows))
    return _table_response(store)


@app.post("/headers", response_model=TableResponse)
def add_header(payload: AddHeaderRequest, store: TableStore = Depends(get_store)):
    store.add_header(payload.name)
    return _table_response(store)


@app.post("/cells", response_model=TableResponse)
def update_cell(payload: UpdateCellRequest, store: TableStore = Depends(get_store)):
    store.update_cell(payload.rowIndex, payload.header, payload.value)
    return _table_response(store)


@app.get("/export/{fmt_name}")
def export(fmt_name: str, store: TableStore = Depends(get_store)):
    try:
        fmt = formats.for_name(fmt_name)
    except UnsupportedFormatError as e:
        raise HTTPException(status_code=404, detail=str(e))

    data = fmt.encode(store.get())
    logger.info("Exported %d rows as %s", len(store.get()), fmt.name)
    return Response(
        content=data,
        media_type=fmt.media_type,
        headers={"Content-Disposition": f"attachment; filename={fmt.filename}"},
    )
