"""FastAPI routes for todokit.

Every route is a thin shell over ``TodoCommandService`` and
``TodoQueryService``. Errors are not caught in the routes; the exception
handlers registered by ``create_app`` translate them using each error's
``status_code`` and ``code``.
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, FastAPI, Query, Request
from fastapi.responses import JSONResponse

from todokit import __version__
from todokit.application import (
    CommandValidationError,
    TodoCommandService,
    TodoDto,
    TodoMapper,
    TodoQueryService,
)
from todokit.domain.todo import DomainError, TodoNotFoundError, TodoRepository
from todokit.interfaces.api.schemas import ErrorResponse, TodoStatsResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/todos", tags=["todos"])


def get_command_service(request: Request) -> TodoCommandService:
    return request.app.state.command_service


def get_query_service(request: Request) -> TodoQueryService:
    return request.app.state.query_service


# =============================================================================
# Queries
# =============================================================================


@router.get("", response_model=list[TodoDto])
def list_todos(
    filter: str = Query("all"),
    sort_by: Optional[str] = Query(None, alias="sortBy"),
    sort_order: str = Query("asc", alias="sortOrder"),
    queries: TodoQueryService = Depends(get_query_service),
) -> list[TodoDto]:
    todos = queries.get_filtered(filter=filter, sort_by=sort_by, sort_order=sort_order)
    return TodoMapper.to_dto_list(todos)


@router.get("/stats", response_model=TodoStatsResponse)
def get_stats(queries: TodoQueryService = Depends(get_query_service)) -> TodoStatsResponse:
    return TodoStatsResponse.from_stats(queries.get_stats())


@router.get("/{todo_id}", response_model=TodoDto)
def get_todo(todo_id: str, queries: TodoQueryService = Depends(get_query_service)) -> TodoDto:
    todo = queries.get_by_id(todo_id)
    if todo is None:
        # Absence is an error at the HTTP boundary
        raise TodoNotFoundError(todo_id)
    return TodoMapper.to_dto(todo)


# =============================================================================
# Commands
# =============================================================================


@router.post("", response_model=TodoDto, status_code=201)
def create_todo(
    payload: dict[str, Any] = Body(...),
    commands: TodoCommandService = Depends(get_command_service),
) -> TodoDto:
    return TodoMapper.to_dto(commands.create_todo(payload))


@router.put("/{todo_id}", response_model=TodoDto)
def update_todo(
    todo_id: str,
    payload: dict[str, Any] = Body(...),
    commands: TodoCommandService = Depends(get_command_service),
) -> TodoDto:
    return TodoMapper.to_dto(commands.update_todo(todo_id, payload))


@router.patch("/{todo_id}/toggle", response_model=TodoDto)
def toggle_todo(todo_id: str, commands: TodoCommandService = Depends(get_command_service)) -> TodoDto:
    return TodoMapper.to_dto(commands.toggle_todo(todo_id))


@router.patch("/{todo_id}/complete", response_model=TodoDto)
def complete_todo(todo_id: str, commands: TodoCommandService = Depends(get_command_service)) -> TodoDto:
    return TodoMapper.to_dto(commands.complete_todo(todo_id))


@router.delete("/{todo_id}", status_code=204)
def delete_todo(todo_id: str, commands: TodoCommandService = Depends(get_command_service)) -> None:
    commands.delete_todo(todo_id)


# =============================================================================
# Application
# =============================================================================


def _error_response(status_code: int, body: ErrorResponse) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=body.model_dump(exclude_none=True))


def create_app(repository: TodoRepository) -> FastAPI:
    """Build the FastAPI application over a repository."""
    app = FastAPI(title="todokit", version=__version__)
    app.state.command_service = TodoCommandService(repository)
    app.state.query_service = TodoQueryService(repository)
    app.include_router(router)

    @app.exception_handler(CommandValidationError)
    def handle_validation_error(request: Request, exc: CommandValidationError) -> JSONResponse:
        return _error_response(
            exc.status_code,
            ErrorResponse(code=exc.code, message=exc.summary, errors=exc.issues_by_field()),
        )

    @app.exception_handler(DomainError)
    def handle_domain_error(request: Request, exc: DomainError) -> JSONResponse:
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
        return _error_response(exc.status_code, ErrorResponse(code=exc.code, message=exc.message))

    @app.exception_handler(ValueError)
    def handle_bad_query(request: Request, exc: ValueError) -> JSONResponse:
        return _error_response(400, ErrorResponse(code="BAD_REQUEST", message=str(exc)))

    return app
