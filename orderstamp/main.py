import logging
import uuid

from fastapi import Depends, FastAPI, Request
from fastapi.responses import JSONResponse

from . import __version__
from .schemas import (
    BatchIn,
    BetweenIn,
    ErrorEnvelope,
    ErrorResponse,
    FromValueIn,
    Health,
    StampOut,
    StampsOut,
    Version,
)
from .stamp import InvalidArgument, StampGenerator, default_generator

logger = logging.getLogger(__name__)

app = FastAPI(title="Orderstamp API", version=__version__)


def get_generator() -> StampGenerator:
    return default_generator


def error_response(status_code: int, code: str, message: str) -> JSONResponse:
    body = ErrorResponse(
        error=ErrorEnvelope(code=code, message=message, details={}, requestId=str(uuid.uuid4()))
    )
    return JSONResponse(status_code=status_code, content=body.model_dump())


@app.exception_handler(InvalidArgument)
async def invalid_argument_handler(request: Request, exc: InvalidArgument) -> JSONResponse:
    logger.info("rejected %s: %s", request.url.path, exc)
    return error_response(400, "invalid_argument", str(exc))


# === Health & metadata ===


@app.get("/v1/health", response_model=Health)
def health() -> Health:
    return Health()


@app.get("/v1/version", response_model=Version)
def version() -> Version:
    return Version(version=__version__)


# === Stamp endpoints ===


@app.post("/v1/stamps:start", response_model=StampOut)
def start_stamp(generator: StampGenerator = Depends(get_generator)):
    return StampOut(stamp=generator.start())


@app.post("/v1/stamps:end", response_model=StampOut)
def end_stamp(generator: StampGenerator = Depends(get_generator)):
    return StampOut(stamp=generator.end())


@app.post("/v1/stamps:batchStart", response_model=StampsOut)
def batch_start(payload: BatchIn, generator: StampGenerator = Depends(get_generator)):
    return StampsOut(stamps=generator.start_many(payload.count))


@app.post("/v1/stamps:batchEnd", response_model=StampsOut)
def batch_end(payload: BatchIn, generator: StampGenerator = Depends(get_generator)):
    return StampsOut(stamps=generator.end_many(payload.count))


@app.post("/v1/stamps:fromValue", response_model=StampOut)
def from_value(payload: FromValueIn, generator: StampGenerator = Depends(get_generator)):
    try:
        stamp = generator.from_value(payload.value, payload.key)
    except (ValueError, OverflowError) as exc:
        return error_response(400, "invalid_value", str(exc))
    return StampOut(stamp=stamp)


@app.post("/v1/stamps:between", response_model=StampOut)
def between(payload: BetweenIn, generator: StampGenerator = Depends(get_generator)):
    return StampOut(stamp=generator.between(payload.prev, payload.next))
