# assistant/conversation/__init__.py
from .steps import ConversationStep, STEP_ORDER, next_step
from .models import TripPreferences, ConversationState
from .engine import (
    ConversationEngine,
    DEFAULT_PROMPTS,
    GREETING_TEXT,
    READY_TEXT,
    default_engine,
    next_prompt,
    submit_answer,
    is_ready,
    reset,
)

__all__ = [
    "ConversationStep",
    "STEP_ORDER",
    "next_step",
    "TripPreferences",
    "ConversationState",
    "ConversationEngine",
    "DEFAULT_PROMPTS",
    "GREETING_TEXT",
    "READY_TEXT",
    "default_engine",
    "next_prompt",
    "submit_answer",
    "is_ready",
    "reset",
]
