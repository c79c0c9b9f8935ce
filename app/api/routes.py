from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, File, Form, Request, UploadFile
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.database.exceptions import PersistenceError
from app.extraction.exceptions import EmptyDocumentError
from app.intake.exceptions import IntakeError, MissingFileError
from app.intake.models import IncomingUpload
from app.logging.logger import Log
from app.processor.processor import Processor
from app.rates.exceptions import NoRatesFoundError

router = APIRouter(prefix="/api/rates")

CLIENT_ERRORS: tuple[type[Exception], ...] = (
    IntakeError,
    EmptyDocumentError,
    NoRatesFoundError,
)


@router.post("/upload")
def upload_rates(
    request: Request,
    file: UploadFile | None = File(None),
    agent_id: str | None = Form(None),
) -> JSONResponse:
    """Import the rates found in one uploaded pricing document."""
    processor: Processor = request.app.state.processor
    try:
        upload = _read_upload(file, agent_id, processor.max_upload_size_bytes)
        records = processor.process(upload)
    except CLIENT_ERRORS as exc:
        Log.warning(f"Upload rejected: {exc}")
        return JSONResponse(status_code=400, content={"error": str(exc)})
    except PersistenceError as exc:
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to save rates to database", "details": str(exc)},
        )
    except Exception as exc:
        Log.error(f"Upload processing error: {exc}")
        return JSONResponse(
            status_code=500,
            content={"error": "Failed to process upload", "message": str(exc)},
        )

    return JSONResponse(
        status_code=200,
        content={
            "success": True,
            "message": f"Successfully imported {len(records)} rates",
            "count": len(records),
            "rates": jsonable_encoder(records),
        },
    )


@router.get("/test")
def health() -> dict[str, Any]:
    return {
        "message": "Rates API is working",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


def _read_upload(
    file: UploadFile | None,
    agent_id: str | None,
    max_size_bytes: int,
) -> IncomingUpload:
    """Read at most one byte past the ceiling so oversize bodies are never held whole."""
    if file is None or not file.filename:
        raise MissingFileError("No file uploaded")
    try:
        content = file.file.read(max_size_bytes + 1)
    finally:
        file.file.close()
    return IncomingUpload(
        filename=file.filename,
        content_type=file.content_type,
        content=content,
        agent_id=agent_id,
    )
