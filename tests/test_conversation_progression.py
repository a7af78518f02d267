from assistant.conversation import ConversationStep, STEP_ORDER

ANSWERS = [
    "Antalya",
    "orta",
    "7 gün",
    "deniz, tarih",
    "butik otel",
    "deniz ürünleri",
    "araç kiralama",
    "sakin",
]

def test_steps_advance_in_fixed_order(engine):
    state = engine.reset()
    seen = [state.current_step]
    for answer in ANSWERS:
        state = engine.submit_answer(state, answer)
        seen.append(state.current_step)
    assert tuple(seen) == STEP_ORDER

def test_full_conversation_fills_every_slot(engine):
    state = engine.reset()
    for answer in ANSWERS:
        state = engine.submit_answer(state, answer)
    p = state.preferences
    assert p.destination == "Antalya"
    assert p.budget == "medium"
    assert p.duration == "7 gün"
    assert p.interests == ["deniz", "tarih"]
    assert p.accommodation == "butik otel"
    assert p.food == "deniz ürünleri"
    assert p.transport == "araç kiralama"
    assert p.travel_style == "sakin"
    assert state.current_step is ConversationStep.COMPLETE
    assert engine.is_ready(state) is True

def test_complete_is_idempotent(engine):
    state = engine.reset()
    for answer in ANSWERS:
        state = engine.submit_answer(state, answer)
    before = state.model_dump()
    for extra in ("jeszcze raz", "lüks", "a, b"):
        state = engine.submit_answer(state, extra)
    assert state.model_dump() == before
    assert engine.next_prompt(state) is None

def test_submit_does_not_mutate_input_state(engine):
    s0 = engine.reset()
    s1 = engine.submit_answer(s0, "İzmir")
    assert s0.current_step is ConversationStep.DESTINATION
    assert s0.preferences.destination is None
    assert s1.preferences.destination == "İzmir"

def test_destination_is_stored_verbatim(engine):
    s = engine.submit_answer(engine.reset(), "Kapadokya, balon turu!")
    assert s.preferences.destination == "Kapadokya, balon turu!"
    assert s.current_step is ConversationStep.BUDGET
