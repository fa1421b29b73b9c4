# api/main.py
"""
FastAPI backend for TrussCraft - exposes the truss2d solver as a REST API.
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ConfigDict, Field
from typing import List
import logging
import sys
from pathlib import Path

# Add project root to path to import truss2d
sys.path.insert(0, str(Path(__file__).parent.parent))

from truss2d import (
    Load,
    Member,
    Node,
    Support,
    SupportKind,
    TrussError,
    TrussModel,
    solve_truss,
)

logger = logging.getLogger(__name__)


app = FastAPI(
    title="TrussCraft API",
    description="2D pin-jointed truss solver (method of joints)",
    version="0.1.0"
)

# CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://127.0.0.1:3000"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# =============================================================================
# Request/Response Models
# =============================================================================

class ApiModel(BaseModel):
    """Accepts both the camelCase wire names and the Python field names; rejects NaN/inf."""
    model_config = ConfigDict(populate_by_name=True, allow_inf_nan=False)


class NodeData(ApiModel):
    id: int
    x: float
    y: float


class MemberData(ApiModel):
    id: int
    start_node_id: int = Field(..., alias="startNodeId")
    end_node_id: int = Field(..., alias="endNodeId")


class SupportData(ApiModel):
    node_id: int = Field(..., alias="nodeId")
    kind: SupportKind = Field(..., description="Pinned, RollerX or RollerY")


class LoadData(ApiModel):
    node_id: int = Field(..., alias="nodeId")
    fx: float = 0.0
    fy: float = 0.0


class TrussRequest(ApiModel):
    """Structural model to solve."""
    nodes: List[NodeData]
    members: List[MemberData]
    supports: List[SupportData]
    loads: List[LoadData] = Field(default_factory=list)

    def to_model(self) -> TrussModel:
        return TrussModel(
            nodes=[Node(n.id, n.x, n.y) for n in self.nodes],
            members=[Member(m.id, m.start_node_id, m.end_node_id) for m in self.members],
            supports=[Support(s.node_id, s.kind) for s in self.supports],
            loads=[Load(l.node_id, l.fx, l.fy) for l in self.loads],
        )


class MemberForceData(ApiModel):
    member_id: int = Field(..., alias="memberId")
    force: float
    classification: str


class ReactionData(ApiModel):
    node_id: int = Field(..., alias="nodeId")
    rx: float
    ry: float


class TrussResponse(ApiModel):
    """Solved member forces and support reactions."""
    member_forces: List[MemberForceData] = Field(..., alias="memberForces")
    reactions: List[ReactionData]


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "TrussCraft API"}


@app.post("/api/solve", response_model=TrussResponse, response_model_by_alias=True)
def solve(request: TrussRequest):
    """Solve a truss. Modelling and stability errors return 400 with a message."""
    try:
        result = solve_truss(request.to_model())
    except TrussError as e:
        logger.info("Rejected truss (%s): %s", type(e).__name__, e)
        raise HTTPException(status_code=400, detail=str(e))

    return TrussResponse.model_validate(result.to_dict())


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host="0.0.0.0", port=8000)
