from __future__ import annotations
from enum import Enum
from typing import Any, Dict, Optional

class ErrorCode(str, Enum):
    VALIDATION_ERROR = "VALIDATION_ERROR"
    UNKNOWN_SESSION = "UNKNOWN_SESSION"
    NOT_READY = "NOT_READY"
    UNKNOWN_OPTION = "UNKNOWN_OPTION"
    SELECTION_INCOMPLETE = "SELECTION_INCOMPLETE"
    UNKNOWN_ROUTE = "UNKNOWN_ROUTE"

ERROR_MESSAGES = {
    ErrorCode.VALIDATION_ERROR: "Validation failed",
    ErrorCode.UNKNOWN_SESSION: "Unknown conversation session",
    ErrorCode.NOT_READY: "Trip preferences are not complete yet",
    ErrorCode.UNKNOWN_OPTION: "Unknown option",
    ErrorCode.SELECTION_INCOMPLETE: "Every category needs a selection",
    ErrorCode.UNKNOWN_ROUTE: "Unknown route",
}


class AssistantError(Exception):
    """Błąd domenowy niosący kod z ErrorCode; API tłumaczy go na odpowiedź HTTP."""

    code: ErrorCode = ErrorCode.VALIDATION_ERROR

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        self.message = message or ERROR_MESSAGES[self.code]
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"code": self.code.value, "message": self.message, "details": self.details}


class InvalidSeed(AssistantError):
    code = ErrorCode.VALIDATION_ERROR

class UnknownSession(AssistantError):
    code = ErrorCode.UNKNOWN_SESSION

class NotReady(AssistantError):
    code = ErrorCode.NOT_READY

class UnknownOption(AssistantError):
    code = ErrorCode.UNKNOWN_OPTION

class SelectionIncomplete(AssistantError):
    code = ErrorCode.SELECTION_INCOMPLETE

class UnknownRoute(AssistantError):
    code = ErrorCode.UNKNOWN_ROUTE
