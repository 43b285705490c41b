"""FastAPI routes exposing graph builds."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel

from ts_depgraph.analysis.cycles import find_cycles
from ts_depgraph.analysis.graph_models import DependencyGraph
from ts_depgraph.errors import RootDirectoryError
from ts_depgraph.pipeline import build_graph
from ts_depgraph.web.state import state

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


class GraphRequest(BaseModel):
    root_dir: str | None = None
    exclude: list[str] = []
    show_full_path: bool | None = None


def _run_build(req: GraphRequest) -> DependencyGraph:
    config = state.config.to_graph_config(
        root_dir=req.root_dir,
        extra_excludes=req.exclude,
        show_full_path=req.show_full_path,
    )
    return build_graph(config)


async def _build_or_raise(req: GraphRequest) -> DependencyGraph:
    try:
        return await asyncio.to_thread(_run_build, req)
    except RootDirectoryError as e:
        raise HTTPException(400, str(e))
    except Exception:
        logger.exception("Error parsing dependencies")
        raise HTTPException(500, "Failed to parse dependencies")


@router.get("/config")
async def get_config():
    return state.config.to_dict()


@router.get("/graph")
async def get_graph(
    rootDir: str | None = None,
    exclude: list[str] = Query(default=[]),
    showFullPath: bool | None = None,
):
    req = GraphRequest(root_dir=rootDir, exclude=exclude, show_full_path=showFullPath)
    graph = await _build_or_raise(req)
    return graph.to_dict()


@router.post("/graph")
async def post_graph(req: GraphRequest):
    graph = await _build_or_raise(req)
    return graph.to_dict()


@router.get("/cycles")
async def get_cycles(
    rootDir: str | None = None,
    exclude: list[str] = Query(default=[]),
):
    graph = await _build_or_raise(GraphRequest(root_dir=rootDir, exclude=exclude))
    return {
        "cycles": find_cycles(graph),
        "circular_edges": [e.to_dict() for e in graph.circular_edges],
        "circular_count": len(graph.circular_edges),
    }
