# api/sessions.py
from __future__ import annotations

import threading
from collections import OrderedDict
from dataclasses import dataclass, field
from typing import Callable, List, Optional, TypeVar

from assistant.common.errors import UnknownRoute, UnknownSession
from assistant.conversation import ConversationState, default_engine
from assistant.options import PlannedRoute, RouteStatus, Selections

T = TypeVar("T")


@dataclass
class Session:
    state: ConversationState = field(default_factory=default_engine.reset)
    selections: Selections = field(default_factory=Selections)
    # serializuje tury tej samej sesji (handlery sync idą w puli wątków)
    lock: threading.Lock = field(default_factory=threading.Lock, repr=False, compare=False)


class SessionStore:
    """
    Sesje w pamięci procesu: session_id -> Session. Każda sesja ma własny stan,
    nic nie jest współdzielone. Po przekroczeniu `max_sessions` usuwamy najstarszą.
    """

    def __init__(self, max_sessions: int = 1000):
        self.max_sessions = max(1, int(max_sessions))
        self._sessions: "OrderedDict[str, Session]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._sessions)

    def __contains__(self, session_id: str) -> bool:
        return session_id in self._sessions

    def get(self, session_id: str) -> Session:
        with self._lock:
            s = self._sessions.get(session_id)
            if s is None:
                raise UnknownSession(details={"session_id": session_id})
            return s

    def get_or_create(self, session_id: str) -> Session:
        with self._lock:
            s = self._sessions.get(session_id)
            if s is None:
                s = Session()
                self._put(session_id, s)
            return s

    def update(self, session_id: str, fn: Callable[[Session], T], *, create: bool = False) -> T:
        """
        Odczyt-modyfikacja-zapis jednej sesji pod jej blokadą.
        Kolejność blokad: najpierw sesja, potem słownik (tylko na czas zapisu).
        """
        session = self.get_or_create(session_id) if create else self.get(session_id)
        with session.lock:
            result = fn(session)
            self.save(session_id, session)
        return result

    def save(self, session_id: str, session: Session) -> None:
        with self._lock:
            self._put(session_id, session)

    def drop(self, session_id: str) -> Optional[Session]:
        with self._lock:
            return self._sessions.pop(session_id, None)

    def _put(self, session_id: str, session: Session) -> None:
        self._sessions[session_id] = session
        self._sessions.move_to_end(session_id)
        while len(self._sessions) > self.max_sessions:
            self._sessions.popitem(last=False)


class RouteStore:
    """Zapisane trasy (widok 'Rotalarım'): lista wg statusu, oznaczanie jako ukończone, usuwanie."""

    def __init__(self):
        self._routes: "OrderedDict[str, PlannedRoute]" = OrderedDict()
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._routes)

    def save(self, route: PlannedRoute) -> PlannedRoute:
        with self._lock:
            self._routes[route.id] = route
        return route

    def get(self, route_id: str) -> PlannedRoute:
        with self._lock:
            route = self._routes.get(route_id)
        if route is None:
            raise UnknownRoute(details={"route_id": route_id})
        return route

    def list(self, status: Optional[RouteStatus] = None) -> List[PlannedRoute]:
        with self._lock:
            routes = list(self._routes.values())
        if status is None:
            return routes
        return [r for r in routes if r.status is status]

    def counts(self) -> dict:
        with self._lock:
            routes = list(self._routes.values())
        return {s.value: sum(1 for r in routes if r.status is s) for s in RouteStatus}

    def complete(self, route_id: str) -> PlannedRoute:
        with self._lock:
            route = self._routes.get(route_id)
            if route is None:
                raise UnknownRoute(details={"route_id": route_id})
            route = route.model_copy(update={"status": RouteStatus.COMPLETED})
            self._routes[route_id] = route
        return route

    def delete(self, route_id: str) -> PlannedRoute:
        with self._lock:
            route = self._routes.pop(route_id, None)
        if route is None:
            raise UnknownRoute(details={"route_id": route_id})
        return route
