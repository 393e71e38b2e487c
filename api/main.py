# api/main.py
"""
FastAPI backend for mini_beam - exposes the beam solver as a REST API.
"""

import csv
import io
import logging
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field

from mini_beam import (
    BeamError,
    BeamModel,
    DistributedLoad,
    PointLoad,
    Section,
    SolveCache,
    SolverConfig,
    Support,
    SupportType,
    UnderconstrainedSystemError,
    normalize_model,
)
from mini_beam.config import DEFAULTS
from mini_beam.solve import BeamResult

logger = logging.getLogger(__name__)

app = FastAPI(
    title="mini_beam API",
    description="Prismatic Euler-Bernoulli beam analysis",
    version="0.1.0",
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

cache = SolveCache(maxsize=256)


# =============================================================================
# Request/Response Models
# =============================================================================

class SectionData(BaseModel):
    width: float = Field(DEFAULTS.section_width, description="Section width (mm)")
    depth: float = Field(DEFAULTS.section_depth, description="Section depth (mm)")


class SupportData(BaseModel):
    position: float = Field(..., description="Position along beam (mm)")
    type: SupportType = Field(SupportType.PINNED, description="fixed, pinned, roller or free")


class PointLoadData(BaseModel):
    position: float = Field(..., description="Position along beam (mm)")
    magnitude: float = Field(..., description="Load (kN), downward positive")


class DistributedLoadData(BaseModel):
    start: float = Field(..., description="Start (mm)")
    end: float = Field(..., description="End (mm)")
    intensity: float = Field(..., description="Intensity (kN/m), downward positive")


class BeamRequest(BaseModel):
    """Beam description. Positions are clamped into [0, span] when normalize is true."""
    span: float = Field(DEFAULTS.span, description="Span (mm)")
    E: float = Field(DEFAULTS.E, description="Elastic modulus (MPa)")
    section: SectionData = Field(default_factory=SectionData)
    supports: List[SupportData] = Field(default_factory=list)
    point_loads: List[PointLoadData] = Field(default_factory=list)
    distributed_loads: List[DistributedLoadData] = Field(default_factory=list)
    normalize: bool = Field(True, description="Clamp positions and order inputs before solving")
    sample_count: int = Field(80, ge=1, le=1000, description="Samples per element")


class NodeData(BaseModel):
    x: float
    deflection: float
    rotation: float


class ReactionData(BaseModel):
    position: float
    type: str
    force_kN: float
    moment_kNm: float


class SampleData(BaseModel):
    x: float
    deflection: float
    shear: float
    moment: float


class ExtremaData(BaseModel):
    min: float
    minX: float
    max: float
    maxX: float


class BeamResponse(BaseModel):
    """Complete analysis result."""
    success: bool
    error: Optional[str] = None
    nodes: Optional[List[NodeData]] = None
    reactions: Optional[List[ReactionData]] = None
    samples: Optional[List[SampleData]] = None
    extrema: Optional[Dict[str, ExtremaData]] = None


# =============================================================================
# Solve
# =============================================================================

def to_model(request: BeamRequest) -> BeamModel:
    model = BeamModel(
        span=request.span,
        E=request.E,
        section=Section(request.section.width, request.section.depth),
        supports=[Support(s.position, s.type) for s in request.supports],
        point_loads=[PointLoad(p.position, p.magnitude) for p in request.point_loads],
        distributed_loads=[
            DistributedLoad(u.start, u.end, u.intensity) for u in request.distributed_loads
        ],
    )
    if request.normalize:
        model = normalize_model(model)
    return model


def run_request(request: BeamRequest) -> BeamResult:
    """Build the model and solve it through the cache; core errors become HTTP errors."""
    try:
        model = to_model(request)
        return cache.solve(model, SolverConfig(sample_count=request.sample_count))
    except UnderconstrainedSystemError as e:
        raise HTTPException(status_code=422, detail=f"Structure unstable: {e}")
    except BeamError as e:
        raise HTTPException(status_code=400, detail=str(e))


def to_response(result: BeamResult) -> BeamResponse:
    nodes = [
        NodeData(x=x, deflection=float(v), rotation=float(theta))
        for x, (v, theta) in zip(result.node_positions, result.displacements)
    ]
    reactions = [
        ReactionData(
            position=r.position,
            type=r.type.value,
            force_kN=r.force,
            moment_kNm=r.moment,
        )
        for r in result.support_reactions
    ]
    samples = [
        SampleData(x=s.x, deflection=s.deflection, shear=s.shear, moment=s.moment)
        for s in result.samples
    ]
    extrema = {
        "shear": ExtremaData(**result.shear.to_dict()),
        "moment": ExtremaData(**result.moment.to_dict()),
        "deflection": ExtremaData(**result.deflection.to_dict()),
    }
    return BeamResponse(
        success=True,
        nodes=nodes,
        reactions=reactions,
        samples=samples,
        extrema=extrema,
    )


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "mini_beam API", "cached": len(cache)}


@app.post("/api/solve", response_model=BeamResponse)
async def solve(request: BeamRequest):
    """Solve a beam and return nodes, reactions, diagram samples and extrema."""
    result = run_request(request)
    return to_response(result)


@app.post("/api/export/csv")
async def export_csv(request: BeamRequest):
    """Export the diagram samples as CSV."""
    result = run_request(request)

    output = io.StringIO()
    writer = csv.writer(output)
    writer.writerow(["x_mm", "deflection_mm", "shear_kN", "moment_kNm"])
    for s in result.samples:
        writer.writerow([
            round(s.x, 4),
            round(s.deflection, 6),
            round(s.shear, 4),
            round(s.moment, 4),
        ])

    output.seek(0)
    return StreamingResponse(
        iter([output.getvalue()]),
        media_type="text/csv",
        headers={"Content-Disposition": "attachment; filename=beam_diagrams.csv"},
    )


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host="0.0.0.0", port=8000)
