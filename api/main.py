from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from typing import Annotated, Any

from fastapi import Depends, FastAPI, HTTPException, Security, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.security import APIKeyHeader
from pydantic import BaseModel

from steuernummer import (
    Bundesland,
    ErrorKind,
    FinanzamtRegistry,
    SteuernummerError,
    SteuernummerValidator,
)
from steuernummer.config import Settings
from steuernummer.log import setup_logger

logger = logging.getLogger("steuernummer.api")

# ── Auth / API key ───────────────────────────────────────────────────────────

_API_KEY = os.getenv("API_KEY")
_api_key_header = APIKeyHeader(name="X-API-Key", auto_error=False)


async def verify_api_key(key: Annotated[str | None, Security(_api_key_header)]) -> None:
    if not _API_KEY:
        return  # Auth disabled — no env var configured
    if key == _API_KEY:
        return
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid or missing API key",
    )


# ── Pydantic models (JSON API) ───────────────────────────────────────────────


class ValidateRequest(BaseModel):
    value: str
    bundesland: Bundesland | None = None
    lenient: bool | None = None
    error_messages: dict[ErrorKind, str] | None = None


class ValidateResponse(BaseModel):
    valid: bool
    error: str | None = None


class ParseRequest(BaseModel):
    value: str
    bundesland: Bundesland | None = None
    error_messages: dict[ErrorKind, str] | None = None


class ParseResponse(BaseModel):
    bundesfinanzamtnummer: str
    bezirksnummer: str
    unterscheidungsnummer: str
    pruefziffer: str
    normalized_steuernummer: str
    state_prefix: str
    states: list[Bundesland]
    formatted: str


# ── Validator singleton ──────────────────────────────────────────────────────

_settings = Settings.from_env()
_registry: FinanzamtRegistry | None = None
_validator: SteuernummerValidator | None = None


@asynccontextmanager
async def lifespan(_: FastAPI):
    global _registry, _validator
    setup_logger(level=_settings.log_level)
    if _settings.finanzamt_file:
        _registry = FinanzamtRegistry.from_file(_settings.finanzamt_file)
        logger.info("Loaded %d Finanzamt numbers", len(_registry))
    _validator = SteuernummerValidator(
        finanzamt_registry=_registry,
        allow_legacy_separators=_settings.allow_legacy_separators,
    )
    yield
    _validator = None
    _registry = None


def _get_validator(error_messages: dict[ErrorKind, str] | None) -> SteuernummerValidator:
    if not error_messages:
        assert _validator is not None
        return _validator
    return SteuernummerValidator(
        error_messages=error_messages,
        finanzamt_registry=_registry,
        allow_legacy_separators=_settings.allow_legacy_separators,
    )


# ── FastAPI app ──────────────────────────────────────────────────────────────

app = FastAPI(title="steuernummer", lifespan=lifespan)

_CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",")]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health() -> dict[str, Any]:
    return {"status": "ok"}


@app.post(
    "/validate",
    response_model=ValidateResponse,
    dependencies=[Depends(verify_api_key)],
)
async def validate(request: ValidateRequest) -> ValidateResponse:
    lenient = _settings.lenient if request.lenient is None else request.lenient
    error = _get_validator(request.error_messages).validate(
        request.value, request.bundesland, lenient
    )
    return ValidateResponse(valid=error is None, error=error)


@app.post("/parse", response_model=ParseResponse, dependencies=[Depends(verify_api_key)])
async def parse(request: ParseRequest) -> ParseResponse:
    try:
        parsed = _get_validator(request.error_messages).parse(
            request.value, request.bundesland
        )
    except SteuernummerError as exc:
        raise HTTPException(
            status_code=422,
            detail={"kind": exc.kind.value, "message": exc.message},
        ) from exc
    return ParseResponse(
        bundesfinanzamtnummer=parsed.bundesfinanzamtnummer,
        bezirksnummer=parsed.bezirksnummer,
        unterscheidungsnummer=parsed.unterscheidungsnummer,
        pruefziffer=parsed.pruefziffer,
        normalized_steuernummer=parsed.normalized_steuernummer,
        state_prefix=parsed.state_prefix,
        states=sorted(parsed.states, key=lambda land: land.value),
        formatted=parsed.formatted,
    )
