"""Consultation endpoints: ask, plan, diagnose, grid-plan."""

import logging
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from src.api.dependencies import get_dispatcher
from src.api.models import (
    ConsultationResponse,
    ConsultRequest,
    DiagnoseRequest,
    GridPlanRequest,
    PlanRequest,
)
from src.api.response import build_error
from src.config.constants import OperationKind
from src.orchestrator.dispatcher import ConsultationDispatcher
from src.orchestrator.operations import get_operation

logger = logging.getLogger(__name__)

router = APIRouter()


async def _dispatch(
    dispatcher: ConsultationDispatcher,
    kind: OperationKind,
    request: Any,
) -> dict[str, Any] | JSONResponse:
    """Run the dispatcher, turning any failure into a 500 with a short message."""
    try:
        return await dispatcher.dispatch(kind, request)
    except Exception as e:
        operation = get_operation(kind)
        logger.error("Error processing %s request: %s", operation.endpoint, e, exc_info=True)
        return JSONResponse(
            status_code=500,
            content=build_error(operation.failure_message, str(e)),
        )


@router.post("/ask", response_model=ConsultationResponse, response_model_exclude_none=True)
async def ask(
    request: ConsultRequest,
    dispatcher: ConsultationDispatcher = Depends(get_dispatcher),  # noqa: B008
) -> Any:
    """Answer a free-form permaculture question."""
    return await _dispatch(dispatcher, OperationKind.CONSULT, request)


@router.post("/plan", response_model=ConsultationResponse, response_model_exclude_none=True)
async def plan(
    request: PlanRequest,
    dispatcher: ConsultationDispatcher = Depends(get_dispatcher),  # noqa: B008
) -> Any:
    """Generate a zone-based design plan for a site."""
    return await _dispatch(dispatcher, OperationKind.PLAN, request)


@router.post("/diagnose", response_model=ConsultationResponse, response_model_exclude_none=True)
async def diagnose(
    request: DiagnoseRequest,
    dispatcher: ConsultationDispatcher = Depends(get_dispatcher),  # noqa: B008
) -> Any:
    """
    Diagnose a plant health problem.

    Both the plant name and the symptom description must pass the relevance
    check; when both fail, the plant field decides the refusal reason.
    """
    return await _dispatch(dispatcher, OperationKind.DIAGNOSE, request)


@router.post("/grid-plan", response_model=ConsultationResponse, response_model_exclude_none=True)
async def grid_plan(
    request: GridPlanRequest,
    dispatcher: ConsultationDispatcher = Depends(get_dispatcher),  # noqa: B008
) -> Any:
    """Lay out the requested plants on a width x length plot."""
    return await _dispatch(dispatcher, OperationKind.GRID_PLAN, request)
