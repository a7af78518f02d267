from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from assistant.common.errors import InvalidSeed
from assistant.common.validators import validate_preferences_seed
from assistant.nlp.extract import BUDGET_KEYWORDS, classify_budget, split_interests
from .models import ConversationState, TripPreferences
from .steps import ConversationStep, next_step, slot_for_step

logger = logging.getLogger(__name__)

DEFAULT_PROMPTS: Dict[ConversationStep, str] = {
    ConversationStep.DESTINATION:   "Hangi destinasyona gitmek istiyorsunuz?",
    ConversationStep.BUDGET:        "Bütçeniz nasıl olsun: ekonomik, orta mı yoksa lüks mü?",
    ConversationStep.DURATION:      "Kaç gün kalmayı planlıyorsunuz?",
    ConversationStep.INTERESTS:     "Hangi aktiviteler ilginizi çekiyor? (ör. doğa, deniz, kültür) Virgülle ayırabilirsiniz.",
    ConversationStep.ACCOMMODATION: "Nasıl bir konaklama tercih edersiniz? (otel, airbnb, villa, hostel, resort...)",
    ConversationStep.FOOD:          "Hangi mutfakları seversiniz? (yerel lezzetler, deniz ürünleri, vejetaryen...)",
    ConversationStep.TRANSPORT:     "Ulaşımda neyi tercih edersiniz? (araç kiralama, toplu taşıma, özel transfer...)",
    ConversationStep.TRAVEL_STYLE:  "Seyahat tarzınız nasıl? (sakin, macera dolu, kültür odaklı...)",
}

GREETING_TEXT = "Merhaba! Size nasıl yardımcı olabilirim? Seyahat planlarınız hakkında konuşalım! 🌍"
READY_TEXT = "Harika, temel bilgiler tamam! Tercihlerinize göre otel, restoran, aktivite ve ulaşım seçeneklerini hazırlıyorum."

Seed = Union[TripPreferences, Mapping[str, Any], None]


class ConversationEngine:
    """
    Deterministyczne wypełnianie slotów w stałej kolejności kroków:
    destination -> budget -> duration -> interests -> accommodation -> food
    -> transport -> travelStyle -> complete.

    Silnik nie trzyma stanu rozmowy: każda operacja dostaje ConversationState
    i zwraca nowy. Gotowość (handoff) następuje, gdy znane są destination,
    budget i duration, niezależnie od bieżącego kroku.
    """

    def __init__(
        self,
        prompts: Optional[Mapping[ConversationStep, str]] = None,
        budget_keywords: Optional[Sequence[Tuple[str, str]]] = None,
    ):
        self.prompts: Dict[ConversationStep, str] = dict(DEFAULT_PROMPTS)
        if prompts:
            self.prompts.update(prompts)
        self.budget_keywords: List[Tuple[str, str]] = list(
            BUDGET_KEYWORDS if budget_keywords is None else budget_keywords
        )

    # ------------ pytania ------------
    def next_prompt(self, state: ConversationState) -> Optional[str]:
        """Pytanie dla bieżącego kroku; dla `complete` brak pytania (None)."""
        return self.prompts.get(state.current_step)

    # ------------ przejścia ------------
    def submit_answer(self, state: ConversationState, raw_text: str) -> ConversationState:
        step = state.current_step
        if step is ConversationStep.COMPLETE:
            return state
        if not isinstance(raw_text, str) or not raw_text.strip():
            logger.debug("blank answer at step=%s, re-asking", step.value)
            return state

        slot = slot_for_step(step)
        prefs = state.preferences
        if prefs.get_slot(slot) is None:
            prefs = prefs.with_slot(slot, self.extract_value(step, raw_text))
        else:
            # slot ustawiony wcześniej (seed po restarcie): wartości nie nadpisujemy
            logger.debug("slot=%s already set, keeping value and advancing", slot)
            prefs = prefs.model_copy(deep=True)

        new_state = state.model_copy(update={"current_step": next_step(step), "preferences": prefs})
        if self.is_ready(new_state) and not self.is_ready(state):
            logger.info("minimum slots filled at step=%s, ready for handoff", step.value)
        return new_state

    def extract_value(self, step: ConversationStep, raw_text: str) -> Any:
        """Wartość slotu z surowej wypowiedzi dla danego kroku."""
        if step is ConversationStep.BUDGET:
            return classify_budget(raw_text, self.budget_keywords)
        if step is ConversationStep.INTERESTS:
            # same przecinki dają pustą listę; krok i tak przechodzi dalej
            return split_interests(raw_text)
        return raw_text

    # ------------ handoff ------------
    def is_ready(self, state: ConversationState) -> bool:
        return state.current_step is ConversationStep.COMPLETE or state.preferences.has_required()

    def reset(self, seed: Seed = None) -> ConversationState:
        """
        Świeży stan od kroku `destination`. Seed (np. gdy użytkownik prosi o inne
        opcje) przenosi wcześniejsze preferencje; słownik jest walidowany.
        """
        if seed is None:
            prefs = TripPreferences()
        elif isinstance(seed, TripPreferences):
            prefs = seed.model_copy(deep=True)
        else:
            ok, out = validate_preferences_seed(dict(seed))
            if not ok:
                raise InvalidSeed(details={"reason": out})
            prefs = TripPreferences.model_validate(out)
        return ConversationState(current_step=ConversationStep.DESTINATION, preferences=prefs)


default_engine = ConversationEngine()


def next_prompt(state: ConversationState) -> Optional[str]:
    return default_engine.next_prompt(state)

def submit_answer(state: ConversationState, raw_text: str) -> ConversationState:
    return default_engine.submit_answer(state, raw_text)

def is_ready(state: ConversationState) -> bool:
    return default_engine.is_ready(state)

def reset(seed: Seed = None) -> ConversationState:
    return default_engine.reset(seed)
