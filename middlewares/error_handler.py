import logging
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from services.timetable_service import TimetableConflictError

logger = logging.getLogger(__name__)


def _now_iso():
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def add_error_handlers(app: FastAPI):
    @app.exception_handler(TimetableConflictError)
    async def timetable_conflict_handler(request: Request, exc: TimetableConflictError):
        return JSONResponse(
            status_code=409,
            content={
                "error": {
                    "code": "TIMETABLE_CONFLICT",
                    "message": str(exc),
                    "conflicts": [c.model_dump(mode="json") for c in exc.conflicts],
                },
                "generated_at": _now_iso(),
                "latency_ms": 0,
            },
        )

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content={
                "error": {"code": "INTERNAL_ERROR", "message": str(exc)},
                "generated_at": _now_iso(),
                "latency_ms": 0,
            },
        )
