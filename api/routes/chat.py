# api/routes/chat.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from assistant.common import metrics
from assistant.common.errors import AssistantError, ErrorCode, NotReady
from assistant.common.metrics import MetricKey
from assistant.common.telemetry import log_turn_event
from assistant.conversation import READY_TEXT, default_engine as engine
from assistant.options import finalize_route, find_option, generate_options
from api.sessions import RouteStore, Session, SessionStore

router = APIRouter()

HTTP_STATUS = {
    ErrorCode.VALIDATION_ERROR: 422,
    ErrorCode.UNKNOWN_SESSION: 404,
    ErrorCode.UNKNOWN_OPTION: 404,
    ErrorCode.UNKNOWN_ROUTE: 404,
    ErrorCode.NOT_READY: 409,
    ErrorCode.SELECTION_INCOMPLETE: 409,
}


class ChatIn(BaseModel):
    session_id: str = Field(..., min_length=1)
    text: str

class ResetIn(BaseModel):
    preferences: Optional[Dict[str, Any]] = None

class SelectIn(BaseModel):
    option_id: str


def _store(req: Request) -> SessionStore:
    return req.app.state.sessions

def _routes(req: Request) -> RouteStore:
    return req.app.state.routes

def http_error(err: AssistantError) -> HTTPException:
    return HTTPException(status_code=HTTP_STATUS.get(err.code, 400), detail=err.to_dict())

def _turn_payload(session_id: str, session: Session) -> Dict[str, Any]:
    state = session.state
    ready = engine.is_ready(state)
    prompt = None if ready else engine.next_prompt(state)
    return {
        "session_id": session_id,
        "step": state.current_step.value,
        "prompt": prompt,
        "message": READY_TEXT if ready else prompt,
        "ready": ready,
        "preferences": state.preferences.to_payload(),
    }

def _require_ready(session: Session) -> None:
    if not engine.is_ready(session.state):
        raise NotReady(details={"step": session.state.current_step.value})


@router.get("/health")
def health():
    return {"status": "OK", "timestamp": datetime.now(timezone.utc).isoformat()}

@router.get("/metrics")
def metrics_report():
    return metrics.report()

@router.post("/chat")
def chat(req: Request, body: ChatIn):
    blank = not body.text.strip()

    def _turn(session: Session):
        before = session.state
        session.state = engine.submit_answer(before, body.text)
        ready = engine.is_ready(session.state)
        metrics.inc(MetricKey.CHAT_TURNS)
        if blank:
            metrics.inc(MetricKey.CHAT_BLANK)
        if ready and not engine.is_ready(before):
            metrics.inc(MetricKey.CHAT_HANDOFF)
        log_turn_event(body.session_id, before.current_step.value, session.state.current_step.value, ready=ready, blank=blank)
        return _turn_payload(body.session_id, session)

    return _store(req).update(body.session_id, _turn, create=True)

@router.get("/chat/{session_id}")
def chat_state(req: Request, session_id: str):
    try:
        session = _store(req).get(session_id)
    except AssistantError as e:
        raise http_error(e)
    return _turn_payload(session_id, session)

@router.post("/chat/{session_id}/reset")
def chat_reset(req: Request, session_id: str, body: Optional[ResetIn] = None):
    # "poproś o inne opcje": wracamy do rozmowy, opcjonalnie z poprzednimi preferencjami
    seed = body.preferences if body else None
    try:
        state = engine.reset(seed)
    except AssistantError as e:
        raise http_error(e)
    session = Session(state=state)
    _store(req).save(session_id, session)
    metrics.inc(MetricKey.CHAT_RESET)
    return _turn_payload(session_id, session)

@router.get("/chat/{session_id}/options")
def chat_options(req: Request, session_id: str):
    try:
        session = _store(req).get(session_id)
        _require_ready(session)
    except AssistantError as e:
        raise http_error(e)
    options = generate_options(session.state.preferences)
    return {
        "session_id": session_id,
        "preferences": session.state.preferences.to_payload(),
        "options": [o.model_dump(mode="json") for o in options],
    }

@router.post("/chat/{session_id}/selections")
def chat_select(req: Request, session_id: str, body: SelectIn):
    def _select(session: Session):
        _require_ready(session)
        option = find_option(body.option_id, generate_options(session.state.preferences))
        session.selections.select(option)
        return {
            "session_id": session_id,
            "selections": session.selections.model_dump(mode="json")["chosen"],
            "complete": session.selections.is_complete(),
            "total_cost": session.selections.total_cost(),
        }

    try:
        return _store(req).update(session_id, _select)
    except AssistantError as e:
        raise http_error(e)

@router.post("/chat/{session_id}/route")
def chat_route(req: Request, session_id: str):
    def _finalize(session: Session):
        _require_ready(session)
        return _routes(req).save(finalize_route(session.state.preferences, session.selections))

    try:
        route = _store(req).update(session_id, _finalize)
    except AssistantError as e:
        raise http_error(e)
    metrics.inc(MetricKey.ROUTES_FINALIZED)
    return route.model_dump(mode="json", by_alias=True)
