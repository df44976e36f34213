"""Context manifest — makes the projector API self-describing.

``GET /context`` returns every configurable parameter (type, default,
constraints, description) grouped by section, derived directly from the
Pydantic config models so the manifest never drifts from the code.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from mrr_projector.config import DisplayConfig, PricingTier, ProjectionParameters, Scenario


class ParameterInfo(BaseModel):
    """One configurable parameter, machine-readable."""
    name: str
    type: str
    default: Any
    description: str
    constraints: dict[str, Any] = Field(default_factory=dict)


class SectionSchema(BaseModel):
    """Schema for one configuration section (e.g. projection, display)."""
    section: str
    description: str
    parameters: list[ParameterInfo]


class ProjectorContext(BaseModel):
    """Self-describing context for API consumers."""
    name: str
    version: str
    description: str
    key_formulas: list[dict[str, str]]
    input_sections: list[SectionSchema]


def _extract_params(model_cls: type[BaseModel]) -> list[ParameterInfo]:
    """Extract parameter info from a Pydantic model class."""
    params: list[ParameterInfo] = []
    for name, field_info in model_cls.model_fields.items():
        constraints: dict[str, Any] = {}
        for attr in ("ge", "gt", "le", "lt"):
            for m in field_info.metadata:
                if hasattr(m, attr):
                    constraints[attr] = getattr(m, attr)

        default = field_info.default
        default_val = default if default is not None and not callable(default) else None

        type_str = str(field_info.annotation) if field_info.annotation else "Any"
        type_str = type_str.replace("typing.", "").replace("<class '", "").replace("'>", "")

        params.append(ParameterInfo(
            name=name,
            type=type_str,
            default=default_val,
            description=field_info.description or "",
            constraints=constraints,
        ))
    return params


_SECTIONS: list[tuple[str, str, type[BaseModel]]] = [
    ("tiers[]", "One entry per pricing plan; base MRR = Σ unit_price × subscriber_count.", PricingTier),
    ("projection", "Horizon, compound monthly growth rate and first month.", ProjectionParameters),
    ("display", "Currency, label precisions and chart layout in 0–100 space.", DisplayConfig),
]


def build_context() -> ProjectorContext:
    """Build the context manifest."""
    return ProjectorContext(
        name="MRR Projector",
        version="1.0",
        description=(
            "Turns pricing tiers into a projected monthly-recurring-revenue curve, "
            "a jittered 'actual' series, and normalised chart geometry with axis labels."
        ),
        key_formulas=[
            {"name": "base_mrr", "formula": "Σ unit_price × subscriber_count"},
            {"name": "projected[i]", "formula": "base_mrr × (1 + g/100)^i"},
            {"name": "actual[i]", "formula": "projected[i] × (1 + u_i), u_i ~ U[-0.05, 0.05]"},
            {"name": "y(v)", "formula": "90 − (v − min)/(max − min) × 80; 50 when max == min"},
            {"name": "growth_pct", "formula": "(last − first)/first × 100; fallback when first == 0"},
        ],
        input_sections=[
            SectionSchema(section=name, description=desc, parameters=_extract_params(cls))
            for name, desc, cls in _SECTIONS
        ],
    )


def get_scenario_schema() -> dict[str, Any]:
    """Full JSON Schema for the Scenario input."""
    return Scenario.model_json_schema()


def get_default_scenario() -> dict[str, Any]:
    """Default Scenario as a JSON-compatible dict."""
    return Scenario().model_dump(mode="json")
