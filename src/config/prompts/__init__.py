"""Prompt templates for the consultation operations."""

from src.config.prompts.consult import build_consult_prompt
from src.config.prompts.diagnosis import build_diagnosis_prompt
from src.config.prompts.grid_plan import build_grid_plan_prompt
from src.config.prompts.planning import build_planning_prompt

__all__ = [
    "build_consult_prompt",
    "build_diagnosis_prompt",
    "build_grid_plan_prompt",
    "build_planning_prompt",
]
