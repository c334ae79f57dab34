from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, Query, Request

from saturn.application import RunService
from saturn.core.schema import TeamStatPayload
from saturn.domain import RunRecord

router = APIRouter(prefix="/runs", tags=["runs"])


def _get_run_service(request: Request) -> RunService:
    return request.app.state.run_service


def _serialise_run(run: RunRecord) -> dict[str, Any]:
    return {
        "run_id": run.run_id,
        "status": run.status,
        "busy": run.busy,
        "error": run.error,
        "started_at": run.started_at.isoformat() if run.started_at else None,
        "finished_at": run.finished_at.isoformat() if run.finished_at else None,
        "items": [
            TeamStatPayload.from_domain(item).model_dump(by_alias=True, mode="json")
            for item in run.items
        ],
    }


@router.post("")
async def start_run(request: Request, wait: bool = Query(default=False)) -> dict:
    """Enqueue every team and poll for results in the background."""
    service = _get_run_service(request)
    run_id = service.start_run()
    if not wait:
        run = service.get_run(run_id)
        return {"run_id": run_id, "status": run.status if run else "pending"}
    run = await service.wait(run_id)
    if run is None:  # pragma: no cover - run was created above
        raise HTTPException(status_code=404, detail="run not found")
    return _serialise_run(run)


@router.get("")
async def list_runs(request: Request) -> dict:
    service = _get_run_service(request)
    items = [
        {
            "run_id": run.run_id,
            "status": run.status,
            "busy": run.busy,
            "records": len(run.items),
            "error": run.error,
        }
        for run in service.list_runs()
    ]
    return {"items": items}


@router.get("/{run_id}")
async def get_run(request: Request, run_id: str) -> dict:
    service = _get_run_service(request)
    run = service.get_run(run_id)
    if run is None:
        raise HTTPException(status_code=404, detail="run not found")
    return _serialise_run(run)
