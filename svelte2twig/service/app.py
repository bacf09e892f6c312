"""FastAPI application entrypoint for svelte2twig service mode."""

from __future__ import annotations

import asyncio
from typing import Any, Callable, Dict, List, Optional

try:  # pragma: no cover - optional dependency
    from fastapi import FastAPI
    from fastapi.responses import JSONResponse
    from pydantic import BaseModel

    _FASTAPI_AVAILABLE = True
except ModuleNotFoundError:  # pragma: no cover - service mode optional
    FastAPI = None  # type: ignore[assignment]
    JSONResponse = None  # type: ignore[assignment]
    BaseModel = object  # type: ignore[assignment]
    _FASTAPI_AVAILABLE = False

from ..config import DEFAULT_SLOT_NAME, ConfigError, TranslationOptions
from ..engine import result_payload, translate_component
from ..metadata.overrides import OverrideError, parse_override
from ..models import ComponentResult


class TranslateRequest(BaseModel):
    ast: Dict[str, Any]
    name: str = "component.svelte"
    theme: str
    default_slot_name: str = DEFAULT_SLOT_NAME
    component_yml: Optional[str] = None
    source: Optional[str] = None


class DiagnosticModel(BaseModel):
    level: int
    code: str
    message: str


class TranslateResponse(BaseModel):
    name: str
    template: str
    metadata: str
    slots: List[str]
    diagnostics: List[DiagnosticModel]


class HealthResponse(BaseModel):
    status: str


Translate = Callable[..., ComponentResult]


def create_app(translate: Translate = translate_component) -> FastAPI:
    """Create the FastAPI application exposing component translation."""

    if not _FASTAPI_AVAILABLE:  # pragma: no cover - validated via unit tests
        raise RuntimeError(
            "FastAPI is required for service mode. Install it with `pip install svelte2twig[service]`."
        )

    app = FastAPI(title="svelte2twig Service", version="1.0.0")

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/translate", response_model=TranslateResponse)
    async def translate_endpoint(payload: TranslateRequest) -> TranslateResponse:
        if not payload.theme.strip():
            raise ConfigError("A theme name is required to namespace components")
        override = parse_override(payload.component_yml or "", source="component_yml")
        options = TranslationOptions(
            theme=payload.theme, default_slot_name=payload.default_slot_name
        )

        def _run() -> ComponentResult:
            return translate(
                payload.ast,
                path=payload.name,
                options=options,
                override=override,
                source=payload.source,
            )

        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(None, _run)
        return TranslateResponse(**result_payload(result))

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(OverrideError)
    async def override_error_handler(_: Any, exc: OverrideError) -> JSONResponse:
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    return app


def run_service(
    host: str = "127.0.0.1", port: int = 8000
) -> None:  # pragma: no cover - integration path
    if not _FASTAPI_AVAILABLE:
        raise RuntimeError(
            "FastAPI is required for service mode. Install it with `pip install svelte2twig[service]`."
        )

    try:
        import uvicorn
    except ModuleNotFoundError as exc:  # pragma: no cover - optional dependency
        raise RuntimeError(
            "uvicorn is required to run the service. Install it with `pip install uvicorn`."
        ) from exc

    app = create_app()
    uvicorn.run(app, host=host, port=port)
