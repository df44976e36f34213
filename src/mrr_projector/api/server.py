"""FastAPI server — HTTP access to the MRR projector.

Run with:
    uvicorn mrr_projector.api.server:app --reload --port 8000

Or:
    python -m mrr_projector.api.server

Endpoints:
    GET  /context              — parameter manifest + key formulas
    GET  /schema               — full JSON Schema for Scenario inputs
    GET  /scenario/defaults    — complete default scenario as JSON
    POST /project              — run the pipeline (partial or full Scenario)
    POST /project/narrative    — run + plain-English interpretation only
"""

from __future__ import annotations

from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from mrr_projector.config.scenario import Scenario
from mrr_projector.engine.pipeline import run_pipeline
from mrr_projector.api.context import build_context, get_scenario_schema, get_default_scenario
from mrr_projector.api.narrative import generate_narrative


# ═══════════════════════════════════════════════════════════════════════════
# App setup
# ═══════════════════════════════════════════════════════════════════════════

app = FastAPI(
    title="MRR Projector API",
    version="1.0",
    description=(
        "Project monthly recurring revenue from pricing tiers and get "
        "chart-ready geometry (normalised polylines + axis labels). "
        "Every request recomputes from scratch; nothing is stored."
    ),
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ValidationError)
def scenario_validation_error(request: Request, exc: ValidationError):
    """Merged scenarios that fail config validation are client errors (422)."""
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors(include_url=False, include_context=False))},
    )


# ═══════════════════════════════════════════════════════════════════════════
# Request / response models
# ═══════════════════════════════════════════════════════════════════════════

class ProjectRequest(BaseModel):
    """Request body for /project. All fields optional — defaults used for missing."""
    scenario: dict[str, Any] = Field(
        default_factory=dict,
        description="Partial or full Scenario JSON. Missing fields use defaults; "
                    "lists (tiers) replace the default list wholesale. "
                    "Example: {'projection': {'months_ahead': 24}, 'random_seed': 7}",
    )


class ProjectResponse(BaseModel):
    """Response from /project."""
    result: dict[str, Any]
    narrative: str = ""


# ═══════════════════════════════════════════════════════════════════════════
# Helpers
# ═══════════════════════════════════════════════════════════════════════════

def _build_scenario(overrides: dict[str, Any]) -> Scenario:
    """Build a Scenario from partial overrides merged onto defaults."""
    defaults = get_default_scenario()
    _deep_merge(defaults, overrides)
    return Scenario(**defaults)


def _deep_merge(base: dict, overrides: dict) -> dict:
    """Recursively merge overrides into base dict."""
    for key, val in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(val, dict):
            _deep_merge(base[key], val)
        else:
            base[key] = val
    return base


# ═══════════════════════════════════════════════════════════════════════════
# Endpoints
# ═══════════════════════════════════════════════════════════════════════════

@app.get("/health")
def health_check():
    """Health check for deployment platforms."""
    return {"status": "ok"}


@app.get("/")
def root():
    """API root — returns a welcome message and pointer to /context."""
    return {
        "name": "MRR Projector API",
        "version": "1.0",
        "start_here": "GET /context",
        "docs": "GET /docs (interactive Swagger UI)",
    }


@app.get("/context")
def get_context():
    """Parameter manifest and key formulas."""
    return build_context()


@app.get("/schema")
def get_schema():
    """Full JSON Schema for Scenario — all input parameters with types, defaults, constraints."""
    return get_scenario_schema()


@app.get("/scenario/defaults")
def get_defaults():
    """Complete default Scenario as JSON. Use as a starting point for modifications."""
    return get_default_scenario()


@app.post("/project", response_model=ProjectResponse)
def project(req: ProjectRequest):
    """Run the full pipeline and return projection, geometry, labels and summary.

    Example minimal request:
    ```json
    {"scenario": {"tiers": [{"name": "Pro", "unit_price": 49, "subscriber_count": 20}]}}
    ```
    """
    scenario = _build_scenario(req.scenario)
    result = run_pipeline(scenario)
    return ProjectResponse(
        result=result.model_dump(mode="json"),
        narrative=generate_narrative(result, scenario),
    )


@app.post("/project/narrative")
def project_with_narrative(req: ProjectRequest):
    """Run the pipeline and return ONLY the narrative plus headline figures."""
    scenario = _build_scenario(req.scenario)
    result = run_pipeline(scenario)
    s = result.summary
    return {
        "narrative": generate_narrative(result, scenario),
        "headline_metrics": {
            "base_mrr": round(result.projection.base_revenue, 2),
            "current_mrr": round(s.current_mrr, 2),
            "current_mrr_label": s.current_mrr_label,
            "growth_pct": s.growth_pct,
            "growth_label": s.growth_label,
        },
    }


# ═══════════════════════════════════════════════════════════════════════════
# CLI entry point
# ═══════════════════════════════════════════════════════════════════════════

def main():
    """Run the API server."""
    import uvicorn
    uvicorn.run(
        "mrr_projector.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
