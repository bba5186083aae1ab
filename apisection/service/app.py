"""FastAPI application exposing type rendering over HTTP."""

from __future__ import annotations

from typing import Any, Callable, Dict, List, Optional

from fastapi import Depends, FastAPI
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from ..config import ConfigError
from ..loader import InputError, select_type_nodes
from ..orchestrator import Orchestrator


class RenderRequest(BaseModel):
    types: List[Dict[str, Any]] = Field(default_factory=list)
    title: Optional[str] = None


class ProjectRenderRequest(BaseModel):
    project: Any
    title: Optional[str] = None


class RenderResponse(BaseModel):
    markdown: str
    rendered: List[str]
    skipped: List[str]


class HealthResponse(BaseModel):
    status: str


def _default_orchestrator() -> Orchestrator:
    return Orchestrator()


def create_app(
    orchestrator_factory: Callable[[], Orchestrator] = _default_orchestrator,
) -> FastAPI:
    """Create the FastAPI application."""
    app = FastAPI(title="apisection", version="1.0.0")

    async def get_orchestrator() -> Orchestrator:
        return orchestrator_factory()

    @app.get("/health", response_model=HealthResponse)
    async def health() -> HealthResponse:
        return HealthResponse(status="ok")

    @app.post("/render", response_model=RenderResponse)
    async def render(
        payload: RenderRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> RenderResponse:
        outcome = orchestrator.render_nodes(payload.types, title=payload.title)
        return RenderResponse(
            markdown=outcome.markdown, rendered=outcome.rendered, skipped=outcome.skipped
        )

    @app.post("/render/project", response_model=RenderResponse)
    async def render_project(
        payload: ProjectRenderRequest,
        orchestrator: Orchestrator = Depends(get_orchestrator),
    ) -> RenderResponse:
        nodes = select_type_nodes(payload.project)
        outcome = orchestrator.render_nodes(nodes, title=payload.title)
        return RenderResponse(
            markdown=outcome.markdown, rendered=outcome.rendered, skipped=outcome.skipped
        )

    @app.exception_handler(InputError)
    async def input_error_handler(_: Any, exc: InputError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(ConfigError)
    async def config_error_handler(_: Any, exc: ConfigError) -> JSONResponse:
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    return app


def run_service(host: str = "127.0.0.1", port: int = 8000) -> None:  # pragma: no cover
    import uvicorn

    uvicorn.run(create_app(), host=host, port=port)
