from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from hypercorn.asyncio import serve
from hypercorn.config import Config

from ...api import tool_definitions
from ...api.models import ContactPayload, CreateTodoRequest, TodoListPayload, TodoPayload, dump
from ...errors import EndpointError, LoopBudgetExceeded, OrchestrationError, RequestDeadlineExceeded
from ...orchestrator import TodoAgent

logger = logging.getLogger(__name__)

_STATUS_CODES = {
    EndpointError: 502,
    RequestDeadlineExceeded: 504,
    LoopBudgetExceeded: 500,
}


def _status_for(exc: OrchestrationError) -> int:
    for error_type, status in _STATUS_CODES.items():
        if isinstance(exc, error_type):
            return status
    return 500


def create_app(agent: Optional[TodoAgent] = None) -> FastAPI:
    """Build the HTTP surface; without ``agent`` a configured one is created (fails fast on missing credentials)."""

    agent = agent or TodoAgent()
    app = FastAPI(title="Agentic Todos API", version="1.0.0")
    app.state.agent = agent

    @app.exception_handler(OrchestrationError)
    async def _orchestration_error(_request: Request, exc: OrchestrationError) -> JSONResponse:
        logger.error("Request failed (%s): %s", exc.code, exc.message)
        return JSONResponse(status_code=_status_for(exc), content=exc.to_dict())

    @app.post("/api/todo/create", response_class=PlainTextResponse)
    def create_todo(request: CreateTodoRequest) -> str:
        return agent.create_todo(request.prompt)

    @app.get("/api/todo/list", response_model=TodoListPayload, response_model_by_alias=True)
    def list_todos() -> TodoListPayload:
        return TodoListPayload(todos=[TodoPayload.from_domain(todo) for todo in agent.list_todos()])

    @app.get("/api/contacts")
    def list_contacts() -> Dict[str, Any]:
        contacts = agent.context.contact_repository.list()
        return {"contacts": [dump(ContactPayload.from_domain(contact)) for contact in contacts]}

    @app.get("/api/tools")
    def list_tools() -> Dict[str, Any]:
        return {"tools": tool_definitions()}

    return app


async def _serve(app: FastAPI, config: Config) -> None:
    await serve(app, config)


def run_local_server(host: str = "127.0.0.1", port: int = 8000) -> None:
    app = create_app()
    config = Config()
    config.bind = [f"{host}:{port}"]
    logger.info("Serving Agentic Todos API on %s:%d", host, port)
    asyncio.run(_serve(app, config))
