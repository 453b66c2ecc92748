import logging
from typing import Optional

from fastapi import FastAPI, UploadFile, File, HTTPException, Query
from pydantic import ValidationError

from .encoding import resolve_encoding, strip_bom
from .errors import TabularParseError
from .models import HealthResponse, ParseResponse, ParseSummary, ParserConfig
from .parser import TabularParser
from .rules import ALLOWED_SUFFIXES, DEFAULT_DELIMITER, DEFAULT_QUOTE, ENCODING_RAW
from .settings import Settings, configure_logging

logger = logging.getLogger(__name__)

settings = Settings.from_env()
configure_logging(settings.log_level)

app = FastAPI(
    title="tabparse",
    description="Strict, configurable-dialect parsing of delimited text uploads",
    version="0.1.0",
)


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/parse", response_model=ParseResponse)
async def parse_upload(
    file: UploadFile = File(...),
    delimiter: str = Query(DEFAULT_DELIMITER.decode("latin-1"), min_length=1, max_length=1),
    quote: str = Query(DEFAULT_QUOTE.decode("latin-1"), min_length=1, max_length=1),
    encoding: Optional[str] = Query(None),
):
    if not (file.filename or "").lower().endswith(ALLOWED_SUFFIXES):
        raise HTTPException(status_code=422, detail=f"Only {', '.join(ALLOWED_SUFFIXES)} files are supported")

    requested = encoding or settings.default_encoding
    if requested == ENCODING_RAW:
        raise HTTPException(status_code=422, detail="Raw byte fields cannot be returned as JSON")

    raw = await file.read(settings.max_upload_bytes + 1)
    if len(raw) > settings.max_upload_bytes:
        raise HTTPException(status_code=413, detail=f"Upload exceeds {settings.max_upload_bytes} bytes")

    used, detection = resolve_encoding(raw, requested)
    try:
        config = ParserConfig(delimiter=delimiter, quote=quote, encoding=used)
    except ValidationError as exc:
        raise HTTPException(
            status_code=422,
            detail=exc.errors(include_url=False, include_context=False, include_input=False),
        ) from exc

    try:
        records = TabularParser(config).parse(strip_bom(raw))
    except TabularParseError as exc:
        logger.warning("parse of %s failed: %s", file.filename, exc)
        raise HTTPException(status_code=422, detail=exc.to_dict()) from exc

    logger.info("parsed %s: %d records", file.filename, len(records))
    return ParseResponse(
        records=records,
        summary=ParseSummary(
            rows=len(records),
            columns=len(records[0]) if records else None,
            delimiter=delimiter,
            quote=quote,
            encoding=used,
            detection=detection,
        ),
    )
