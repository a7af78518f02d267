from __future__ import annotations
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from assistant.common.slots import CANONICAL_SLOTS, REQUIRED_SLOTS
from .steps import ConversationStep

# kanoniczna nazwa slotu -> atrybut modelu
_SLOT_FIELDS: Dict[str, str] = {slot: slot for slot in CANONICAL_SLOTS}
_SLOT_FIELDS["travelStyle"] = "travel_style"


class TripPreferences(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    destination: Optional[str] = Field(None, description="Free-text destination")
    budget: Optional[str] = Field(None, description="low / medium / high or raw text")
    duration: Optional[str] = Field(None, description="Free-text trip length")
    interests: Optional[List[str]] = Field(None, description="Activity categories in order of appearance")
    accommodation: Optional[str] = None
    food: Optional[str] = None
    transport: Optional[str] = None
    travel_style: Optional[str] = Field(None, alias="travelStyle")

    def get_slot(self, slot: str) -> Any:
        return getattr(self, _SLOT_FIELDS[slot])

    def has_slot(self, slot: str) -> bool:
        return bool(self.get_slot(slot))

    def with_slot(self, slot: str, value: Any) -> "TripPreferences":
        """Nowa instancja z ustawionym slotem (bieżąca pozostaje bez zmian)."""
        return self.model_copy(update={_SLOT_FIELDS[slot]: value}, deep=True)

    def has_required(self) -> bool:
        return all(self.has_slot(s) for s in REQUIRED_SLOTS)

    def filled_slots(self) -> List[str]:
        return [s for s in CANONICAL_SLOTS if self.has_slot(s)]

    def to_payload(self) -> Dict[str, Any]:
        # kształt przekazywany do UI / konsumenta opcji (camelCase jak w froncie)
        return self.model_dump(by_alias=True)


class ConversationState(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current_step: ConversationStep = Field(ConversationStep.DESTINATION, alias="currentStep")
    preferences: TripPreferences = Field(default_factory=TripPreferences)
