# api/main.py
"""
FastAPI backend for BirdCraft - exposes the birdcraft engine as REST API.
"""

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse
from pydantic import BaseModel, Field
from typing import Dict, List, Optional
import sys
import logging
from pathlib import Path

# Add project root to path to import birdcraft
sys.path.insert(0, str(Path(__file__).parent.parent))

from birdcraft.config import CONFIG
from birdcraft.params import BirdParams, FIELDS
from birdcraft.seed import decode_seed, encode_seed, SeedError
from birdcraft.breed import breed_offspring, random_params
from birdcraft.catalog import pick_good_bird
from birdcraft.geometry import build_bird
from birdcraft.export import export_bird_stl
import numpy as np

logger = logging.getLogger(__name__)


app = FastAPI(
    title="BirdCraft API",
    description="Parametric bird generator",
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

DEFAULT_SEED = encode_seed(BirdParams())


class SeedRequest(BaseModel):
    """A bird given by its seed string."""
    seed: str = Field(DEFAULT_SEED, description="Bird seed, e.g. m.15.80.5.10.h...")


class RandomRequest(BaseModel):
    """Optional RNG seed for reproducible draws."""
    rng_seed: Optional[int] = Field(None, description="Seed for np.random.default_rng")


class BreedRequest(SeedRequest):
    """Parent bird plus optional RNG seed."""
    rng_seed: Optional[int] = Field(None, description="Seed for np.random.default_rng")


class FieldData(BaseModel):
    """One parameter's slider description."""
    name: str
    section: str
    low: float
    high: float
    default: float
    description: str


class BirdData(BaseModel):
    """A bird as parameters plus its seed."""
    seed: str
    params: Dict[str, float]


class OffspringData(BaseModel):
    left: BirdData
    right: BirdData


class MeshData(BaseModel):
    """Triangle mesh for a renderer."""
    vertices: List[List[float]]
    faces: List[List[int]]
    normals: List[List[float]]


class BirdMeshData(BaseModel):
    head: MeshData
    body: MeshData


# =============================================================================
# Helpers
# =============================================================================

def _bird_data(params: BirdParams) -> BirdData:
    return BirdData(seed=encode_seed(params), params=params.to_dict())


def _decode_or_400(seed: str) -> BirdParams:
    try:
        return decode_seed(seed)
    except SeedError as e:
        logger.info("Error parsing seed: %s", e)
        raise HTTPException(status_code=400, detail=str(e))


def _mesh_data(mesh) -> MeshData:
    return MeshData(
        vertices=np.round(mesh.vertices, 4).tolist(),
        faces=mesh.faces.tolist(),
        normals=np.round(mesh.vertex_normals, 4).tolist(),
    )


# =============================================================================
# API Endpoints
# =============================================================================

@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "BirdCraft API"}


@app.get("/api/params", response_model=List[FieldData])
async def list_params():
    """Parameter table: names, sections, slider bounds, defaults."""
    return [
        FieldData(
            name=entry.name, section=entry.section, low=entry.low, high=entry.high,
            default=entry.default, description=entry.description,
        )
        for entry in FIELDS
    ]


@app.get("/api/bird/default", response_model=BirdData)
async def default_bird():
    return _bird_data(BirdParams())


@app.post("/api/bird/good", response_model=BirdData)
async def good_bird(request: RandomRequest):
    """Pick a bird from the curated catalog."""
    rng = np.random.default_rng(request.rng_seed)
    return _bird_data(pick_good_bird(rng))


@app.post("/api/bird/random", response_model=BirdData)
async def random_bird(request: RandomRequest):
    rng = np.random.default_rng(request.rng_seed)
    return _bird_data(random_params(rng))


@app.post("/api/bird/decode", response_model=BirdData)
async def decode_bird(request: SeedRequest):
    return _bird_data(_decode_or_400(request.seed))


@app.post("/api/bird/breed", response_model=OffspringData)
async def breed_bird(request: BreedRequest):
    """Breed a left and a right child from the given bird."""
    parent = _decode_or_400(request.seed)
    offspring = breed_offspring(parent, np.random.default_rng(request.rng_seed))
    return OffspringData(left=_bird_data(offspring.left), right=_bird_data(offspring.right))


@app.post("/api/mesh", response_model=BirdMeshData)
def bird_mesh(request: SeedRequest):
    """Generate head and body meshes for rendering."""
    meshes = build_bird(_decode_or_400(request.seed))
    return BirdMeshData(head=_mesh_data(meshes.head), body=_mesh_data(meshes.body))


@app.post("/api/export/stl")
def export_stl(request: SeedRequest):
    """Export the bird as a single ASCII STL."""
    stl_bytes = export_bird_stl(_decode_or_400(request.seed))
    return StreamingResponse(
        iter([stl_bytes]),
        media_type="model/stl",
        headers={"Content-Disposition": f"attachment; filename={CONFIG.stl_filename}"}
    )


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(app, host="0.0.0.0", port=8000)
