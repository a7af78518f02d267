# assistant/common/metrics.py
from __future__ import annotations
from enum import Enum
from typing import Dict, Union
from collections import defaultdict
import threading


class MetricKey(str, Enum):
    CHAT_TURNS = "chat_turns_total"
    CHAT_BLANK = "chat_blank_total"
    CHAT_HANDOFF = "chat_handoff_total"
    CHAT_RESET = "chat_reset_total"
    ROUTES_FINALIZED = "routes_finalized_total"
    ROUTES_COMPLETED = "routes_completed_total"
    ROUTES_DELETED = "routes_deleted_total"


Key = Union[MetricKey, str]

# liczniki per proces; handlery API są w puli wątków, stąd blokada
_COUNTERS: Dict[str, int] = defaultdict(int)
_LOCK = threading.Lock()

def _name(key: Key) -> str:
    return key.value if isinstance(key, MetricKey) else str(key)

def inc(key: Key, n: int = 1) -> None:
    with _LOCK:
        _COUNTERS[_name(key)] += n

def add_many(pairs: Dict[Key, int]) -> None:
    with _LOCK:
        for k, v in pairs.items():
            _COUNTERS[_name(k)] += int(v)

def snapshot(reset: bool = False) -> Dict[str, int]:
    """Tylko liczniki, które już coś zliczyły."""
    with _LOCK:
        data = dict(_COUNTERS)
        if reset:
            _COUNTERS.clear()
    return data

def report() -> Dict[str, int]:
    """Wszystkie zadeklarowane liczniki (zera też) plus ewentualne dodatkowe klucze."""
    data = {k.value: 0 for k in MetricKey}
    data.update(snapshot())
    return data
