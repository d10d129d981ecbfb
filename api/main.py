import logging
import uuid

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.routers import catalog, journal, readings
from api.schemas import ErrorResponse
from engine import config
from engine.errors import (
    Busy,
    IncompleteReading,
    NoActiveReading,
    NotFound,
    ReadingEngineError,
    SlotEmpty,
    SlotOccupied,
)
from engine.journal.migrate import apply_migrations
from engine.logging import request_id_var, setup_logging

logger = logging.getLogger(__name__)

app = FastAPI(title="Tarot Timer")

_CONFLICTS = (SlotOccupied, SlotEmpty, IncompleteReading, Busy, NoActiveReading)


def status_for(exc: ReadingEngineError) -> int:
    if isinstance(exc, NotFound):
        return 404
    if isinstance(exc, _CONFLICTS):
        return 409
    return 422


@app.middleware("http")
async def bind_request_id(request: Request, call_next):
    rid = request.headers.get("X-Request-ID") or uuid.uuid4().hex
    token = request_id_var.set(rid)
    try:
        response = await call_next(request)
    finally:
        request_id_var.reset(token)
    response.headers["X-Request-ID"] = rid
    return response


@app.exception_handler(ReadingEngineError)
async def reading_error_handler(request: Request, exc: ReadingEngineError) -> JSONResponse:
    status_code = status_for(exc)
    logger.warning(
        "Request rejected",
        extra={"path": request.url.path, "code": exc.code, "status": status_code},
    )
    body = ErrorResponse(error=exc.code, detail=exc.detail)
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.get("/api/health")
async def health_check() -> dict[str, str]:
    return {"status": "ok"}


@app.on_event("startup")
def on_startup() -> None:
    setup_logging()
    apply_migrations()


app.include_router(catalog.router)
app.include_router(readings.router)
app.include_router(journal.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
