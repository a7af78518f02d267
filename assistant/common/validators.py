# assistant/common/validators.py
from __future__ import annotations
from typing import Any, Dict, Optional, Sequence, Tuple

from assistant.common.slots import CANONICAL_SLOTS
from assistant.nlp.extract import classify_budget, split_interests

def validate_text(v):
    """
    Akceptuje: niepusty str. Wartość zostaje bez zmian (verbatim).
    Zwraca (ok: bool, normalized_or_msg)
    """
    if not isinstance(v, str):
        return False, "value must be a string"
    if not v.strip():
        return False, "value cannot be blank"
    return True, v

def validate_budget(v, table: Optional[Sequence[Tuple[str, str]]] = None):
    """
    Akceptuje niepusty str. Normalizuje do low/medium/high według tabeli słów
    kluczowych, a bez dopasowania zostawia surowy tekst.
    """
    ok, out = validate_text(v)
    if not ok:
        return False, out
    return True, classify_budget(out, table)

def validate_interests(v):
    """
    Akceptuje:
      - str: "doğa, deniz" (rozdzielane przecinkami)
      - list[str]
    Zasady:
      - tokeny przycięte, puste odrzucone, kolejność i duplikaty zachowane
      - przynajmniej jeden element
    Zwraca: (ok: bool, normalized_or_msg)
    """
    if isinstance(v, str):
        items = split_interests(v)
    elif isinstance(v, (list, tuple)):
        if not all(isinstance(x, str) for x in v):
            return False, "interests must be a list of strings"
        items = [x.strip() for x in v if x.strip()]
    else:
        return False, "interests must be a list or string"

    if not items:
        return False, "interests cannot be empty"
    return True, items

SLOT_VALIDATORS = {
    "destination":   validate_text,
    "budget":        validate_budget,
    "duration":      validate_text,
    "interests":     validate_interests,
    "accommodation": validate_text,
    "food":          validate_text,
    "transport":     validate_text,
    "travelStyle":   validate_text,
}

# nazwa pythonowa -> kanoniczna
_SLOT_ALIASES = {"travel_style": "travelStyle"}

def validate_preferences_seed(data: Any) -> Tuple[bool, Any]:
    """
    Waliduje preferencje przekazywane z zewnątrz przy restarcie rozmowy.
    Wartości None pomijamy (slot pozostaje pusty). Nieznane sloty odrzucamy.
    Zwraca (ok, dict_kanoniczny | msg)
    """
    if data is None:
        return True, {}
    if not isinstance(data, dict):
        return False, "preferences must be an object"

    out: Dict[str, Any] = {}
    for key, value in data.items():
        slot = _SLOT_ALIASES.get(key, key)
        if slot not in CANONICAL_SLOTS:
            return False, f"unknown slot '{key}'"
        if value is None:
            continue
        ok, norm = SLOT_VALIDATORS[slot](value)
        if not ok:
            return False, f"{slot}: {norm}"
        out[slot] = norm
    return True, out
