# api/routes/planned.py
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Request

from assistant.common import metrics
from assistant.common.errors import AssistantError
from assistant.common.metrics import MetricKey
from assistant.options import RouteStatus
from api.routes.chat import http_error
from api.sessions import RouteStore

router = APIRouter(prefix="/routes")


def _routes(req: Request) -> RouteStore:
    return req.app.state.routes


@router.get("")
def list_routes(req: Request, status: Optional[RouteStatus] = None):
    store = _routes(req)
    return {
        "counts": store.counts(),
        "routes": [r.model_dump(mode="json", by_alias=True) for r in store.list(status)],
    }

@router.get("/{route_id}")
def get_route(req: Request, route_id: str):
    try:
        return _routes(req).get(route_id).model_dump(mode="json", by_alias=True)
    except AssistantError as e:
        raise http_error(e)

@router.post("/{route_id}/complete")
def complete_route(req: Request, route_id: str):
    try:
        route = _routes(req).complete(route_id)
    except AssistantError as e:
        raise http_error(e)
    metrics.inc(MetricKey.ROUTES_COMPLETED)
    return route.model_dump(mode="json", by_alias=True)

@router.delete("/{route_id}")
def delete_route(req: Request, route_id: str):
    try:
        route = _routes(req).delete(route_id)
    except AssistantError as e:
        raise http_error(e)
    metrics.inc(MetricKey.ROUTES_DELETED)
    return {"deleted": route.id}
