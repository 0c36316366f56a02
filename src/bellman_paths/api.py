from __future__ import annotations

import os
import platform
import uuid
from pathlib import Path
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException, Request
from pydantic import BaseModel

from .logger import log_event, log_path
from .paths import describe_graph, shortest_path_rows
from .solver import compute_shortest_paths
from .spec import GraphSpec, parse_graph_spec


APP_VERSION = "0.1.0"
RUN_ID = os.environ.get("BFP_RUN_ID", str(uuid.uuid4()))
app = FastAPI(title="Bellman Paths API", version=APP_VERSION)

# Summary of the last solve, reported by /api/status
LAST_SOLVE: Dict[str, Any] | None = None


class RowOut(BaseModel):
    vertex: int
    label: str
    distance: Optional[int]
    path: Optional[List[int]]


class SolveResponse(BaseModel):
    start: Optional[int]
    has_negative_cycle: bool
    passes: int
    rows: List[RowOut]


def _load(payload: Dict[str, Any]) -> GraphSpec:
    # all document validation lives in parse_graph_spec so the API and files agree
    try:
        return parse_graph_spec(payload)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc))


@app.post("/api/solve", response_model=SolveResponse)
def api_solve(payload: Dict[str, Any]):  # payload is a graph document
    spec = _load(payload)
    result = compute_shortest_paths(spec.graph, spec.start, early_exit=spec.options.early_exit)
    rows = [RowOut(**r.as_dict()) for r in shortest_path_rows(result, spec.labels)]
    log_event("api_solve", start=result.start, has_negative_cycle=result.has_negative_cycle,
              passes=result.passes, vertices=spec.graph.vertex_count, edges=spec.graph.edge_count)
    global LAST_SOLVE
    LAST_SOLVE = {
        "start": result.start,
        "has_negative_cycle": result.has_negative_cycle,
        "vertices": spec.graph.vertex_count,
        "edges": spec.graph.edge_count,
    }
    return SolveResponse(start=result.start, has_negative_cycle=result.has_negative_cycle, passes=result.passes, rows=rows)


@app.post("/api/describe")
def api_describe(payload: Dict[str, Any]):
    spec = _load(payload)
    info = describe_graph(spec.graph, spec.labels)
    log_event("api_describe", vertices=info["vertex_count"], edges=info["edge_count"])
    return info


@app.middleware("http")
async def log_requests(request: Request, call_next):
    req_id = str(uuid.uuid4())
    body = await request.body()
    log_event("http_request", method=request.method, path=request.url.path, body_len=len(body), request_id=req_id, run_id=RUN_ID)
    response = await call_next(request)
    response.headers["X-Request-Id"] = req_id
    response.headers["X-Run-Id"] = RUN_ID
    log_event("http_response", path=request.url.path, status=response.status_code, request_id=req_id, run_id=RUN_ID)
    return response


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/api/status")
def status():
    info: Dict[str, Any] = {
        "status": "ok",
        "version": APP_VERSION,
        "run_id": RUN_ID,
        "python": platform.python_version(),
    }
    if LAST_SOLVE is not None:
        info["last_solve"] = LAST_SOLVE
    return info


@app.get("/api/logs/tail")
def logs_tail(limit: int = 200):
    """Return the last N lines from the structured events log."""
    limit = max(1, min(limit, 1000))
    path = log_path()
    if path is None or not Path(path).exists():
        return {"lines": []}
    lines: list[bytes] = []
    with open(path, "rb") as f:
        f.seek(0, 2)
        size = f.tell()
        block = 4096
        data = b""
        while len(lines) <= limit and size > 0:
            read_size = block if size >= block else size
            size -= read_size
            f.seek(size)
            data = f.read(read_size) + data
            lines = data.splitlines()[-limit:]
    return {"lines": [ln.decode("utf-8", errors="ignore") for ln in lines]}
