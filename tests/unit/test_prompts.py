"""Tests for prompt templates."""

from datetime import date

from src.config.prompts import (
    build_consult_prompt,
    build_diagnosis_prompt,
    build_grid_plan_prompt,
    build_planning_prompt,
)
from src.config.prompts.consult import format_long_date


def test_consult_prompt_defaults():
    prompt = build_consult_prompt("When should I plant garlic?")
    assert "USER QUESTION: When should I plant garlic?" in prompt
    assert "- Location: Iowa, Zone 5" in prompt
    assert "- Soil type: clay" in prompt
    assert "- Space: small homestead" in prompt
    assert f"- Current date: {format_long_date(date.today())}" in prompt


def test_consult_prompt_uses_context():
    prompt = build_consult_prompt(
        "What cover crop?",
        location="Oregon",
        soil_type="sandy",
        space_size="1 acre",
        current_date="March 3, 2026",
        season="Spring",
    )
    assert "- Location: Oregon" in prompt
    assert "- Current date: March 3, 2026" in prompt
    assert "appropriate tasks for Spring" in prompt


def test_format_long_date():
    assert format_long_date(date(2026, 10, 8)) == "October 8, 2026"


def test_planning_prompt():
    prompt = build_planning_prompt("2 acres", "loam", "food forest", "Vermont")
    assert "- Goals: food forest" in prompt
    assert "- Location: Vermont" in prompt


def test_diagnosis_prompt():
    prompt = build_diagnosis_prompt("tomato", "yellow leaves", "1 week", "Texas")
    assert "PLANT: tomato" in prompt
    assert "SYMPTOMS: yellow leaves" in prompt
    assert "TIMEFRAME: 1 week" in prompt


def test_grid_plan_prompt_dimensions_and_defaults():
    prompt = build_grid_plan_prompt(10, 12.5, "tomatoes, basil")
    assert "Dimensions: 10ft × 12.5ft (Area: 125 sq ft)" in prompt
    assert "- USDA Zone: 5" in prompt
    assert "- Soil Type: loam" in prompt
    assert "- Plants to include: tomatoes, basil" in prompt


def test_grid_plan_prompt_large_plot_keeps_full_area():
    prompt = build_grid_plan_prompt(1000, 1500, "chestnuts")
    assert "Dimensions: 1000ft × 1500ft (Area: 1500000 sq ft)" in prompt
    assert "e+" not in prompt


def test_grid_plan_prompt_non_round_width_keeps_precision():
    prompt = build_grid_plan_prompt(12.34567, 10, "kale")
    assert f"Dimensions: 12.34567ft × 10ft (Area: {12.34567 * 10!r} sq ft)" in prompt
