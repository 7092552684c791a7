"""Operation registry -- per-kind fields, prompts and audit text.

Each operation declares the request attributes that must pass relevance
classification, in the order they are checked. The first rejected field
decides the refusal.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from src.api.models import ConsultRequest, DiagnoseRequest, GridPlanRequest, PlanRequest
from src.config.constants import OperationKind
from src.config.prompts import (
    build_consult_prompt,
    build_diagnosis_prompt,
    build_grid_plan_prompt,
    build_planning_prompt,
)
from src.config.settings import Settings


@dataclass(frozen=True)
class OperationSpec:
    """Static description of one request kind."""

    kind: OperationKind
    endpoint: str
    classified_fields: tuple[str, ...]
    build_prompt: Callable[[Any], str]
    """(request) -> upstream prompt."""

    audit_query: Callable[[Any], str]
    """(request) -> text recorded when the request is refused."""

    failure_message: str
    validation_message: str | None = None
    """Fixed 400 message; None lists the invalid fields instead."""

    def max_tokens(self, settings: Settings) -> int:
        return _TOKEN_BUDGETS[self.kind](settings)


_TOKEN_BUDGETS: dict[OperationKind, Callable[[Settings], int]] = {
    OperationKind.CONSULT: lambda s: s.consult_max_tokens,
    OperationKind.PLAN: lambda s: s.plan_max_tokens,
    OperationKind.DIAGNOSE: lambda s: s.diagnose_max_tokens,
    OperationKind.GRID_PLAN: lambda s: s.grid_plan_max_tokens,
}


def _consult_prompt(request: ConsultRequest) -> str:
    ctx = request.context
    if ctx is None:
        return build_consult_prompt(request.question)
    return build_consult_prompt(
        request.question,
        location=ctx.location,
        soil_type=ctx.soil_type,
        space_size=ctx.space_size,
        current_date=ctx.current_date,
        season=ctx.season,
    )


def _plan_prompt(request: PlanRequest) -> str:
    return build_planning_prompt(
        request.space_size, request.soil_type, request.goals, request.location
    )


def _diagnose_prompt(request: DiagnoseRequest) -> str:
    return build_diagnosis_prompt(
        request.plant, request.problem, request.timeframe, request.location
    )


def _grid_plan_prompt(request: GridPlanRequest) -> str:
    return build_grid_plan_prompt(
        request.width,
        request.length,
        request.plants,
        location=request.location,
        zone=request.zone,
        soil_type=request.soil_type,
    )


OPERATIONS: dict[OperationKind, OperationSpec] = {
    OperationKind.CONSULT: OperationSpec(
        kind=OperationKind.CONSULT,
        endpoint="/api/ask",
        classified_fields=("question",),
        build_prompt=_consult_prompt,
        audit_query=lambda r: r.question,
        failure_message="Failed to get AI response",
        validation_message="Question is required",
    ),
    OperationKind.PLAN: OperationSpec(
        kind=OperationKind.PLAN,
        endpoint="/api/plan",
        classified_fields=("goals",),
        build_prompt=_plan_prompt,
        audit_query=lambda r: f"DESIGN: {r.goals}",
        failure_message="Failed to generate plan",
    ),
    OperationKind.DIAGNOSE: OperationSpec(
        kind=OperationKind.DIAGNOSE,
        endpoint="/api/diagnose",
        classified_fields=("plant", "problem"),
        build_prompt=_diagnose_prompt,
        audit_query=lambda r: f"DIAGNOSE - Plant: {r.plant}, Problem: {r.problem}",
        failure_message="Failed to diagnose issue",
    ),
    OperationKind.GRID_PLAN: OperationSpec(
        kind=OperationKind.GRID_PLAN,
        endpoint="/api/grid-plan",
        classified_fields=("plants",),
        build_prompt=_grid_plan_prompt,
        audit_query=lambda r: f"GRID-PLAN: {r.plants}",
        failure_message="Failed to generate grid plan",
        validation_message="Width, length, and plants are required",
    ),
}


def get_operation(kind: OperationKind) -> OperationSpec:
    """Look up the registry entry for an operation kind."""
    return OPERATIONS[kind]


def operation_for_path(path: str) -> OperationSpec | None:
    """Find the operation served at an endpoint path."""
    for spec in OPERATIONS.values():
        if spec.endpoint == path:
            return spec
    return None
