from __future__ import annotations
from enum import Enum
from typing import Dict, Optional


class ConversationStep(str, Enum):
    DESTINATION = "destination"
    BUDGET = "budget"
    DURATION = "duration"
    INTERESTS = "interests"
    ACCOMMODATION = "accommodation"
    FOOD = "food"
    TRANSPORT = "transport"
    TRAVEL_STYLE = "travelStyle"
    COMPLETE = "complete"


STEP_ORDER = (
    ConversationStep.DESTINATION,
    ConversationStep.BUDGET,
    ConversationStep.DURATION,
    ConversationStep.INTERESTS,
    ConversationStep.ACCOMMODATION,
    ConversationStep.FOOD,
    ConversationStep.TRANSPORT,
    ConversationStep.TRAVEL_STYLE,
    ConversationStep.COMPLETE,
)

_NEXT: Dict[ConversationStep, ConversationStep] = {
    cur: nxt for cur, nxt in zip(STEP_ORDER, STEP_ORDER[1:])
}


def next_step(step: ConversationStep) -> ConversationStep:
    """Krok następny w kolejności; `complete` jest stanem końcowym."""
    return _NEXT.get(step, ConversationStep.COMPLETE)


def slot_for_step(step: ConversationStep) -> Optional[str]:
    # każdy krok poza `complete` wypełnia slot o tej samej nazwie
    return None if step is ConversationStep.COMPLETE else step.value
