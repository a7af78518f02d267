# assistant/common/telemetry.py
from __future__ import annotations
import logging
from datetime import datetime, timezone

logger = logging.getLogger("assistant.telemetry")

def log_turn_event(session_id: str, step_before: str, step_after: str, *, ready: bool, blank: bool = False) -> None:
    """
    Jednolinijkowy zapis tury rozmowy (format key=value, łatwy do grepowania).
    Nie zapisujemy treści wypowiedzi użytkownika.
    """
    logger.info(
        "TURN "
        f"sess={session_id} from={step_before} to={step_after} "
        f"ready={ready} blank={blank} "
        f"ts={datetime.now(timezone.utc).isoformat()}"
    )
