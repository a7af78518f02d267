from assistant.conversation import ConversationStep

def test_ready_after_three_minimum_slots(engine):
    state = engine.reset()
    state = engine.submit_answer(state, "Bodrum")
    assert engine.is_ready(state) is False
    state = engine.submit_answer(state, "bilmiyorum")
    assert engine.is_ready(state) is False
    state = engine.submit_answer(state, "bir hafta")
    assert state.current_step is ConversationStep.INTERESTS
    assert engine.is_ready(state) is True

def test_istanbul_scenario(engine):
    state = engine.reset()

    state = engine.submit_answer(state, "İstanbul")
    assert state.preferences.destination == "İstanbul"
    assert state.current_step is ConversationStep.BUDGET

    state = engine.submit_answer(state, "ekonomik tatil istiyorum")
    assert state.preferences.budget == "low"
    assert state.current_step is ConversationStep.DURATION

    state = engine.submit_answer(state, "5 gün")
    assert state.preferences.duration == "5 gün"
    assert state.current_step is ConversationStep.INTERESTS
    assert engine.is_ready(state) is True

    # dalsze odpowiedzi wzbogacają plan, gotowość zostaje
    state = engine.submit_answer(state, "müze, yemek")
    assert state.current_step is ConversationStep.ACCOMMODATION
    assert engine.is_ready(state) is True

def test_prompt_still_follows_step_after_ready(engine):
    state = engine.reset()
    for answer in ("Ankara", "low", "3 gün"):
        state = engine.submit_answer(state, answer)
    assert engine.is_ready(state)
    assert engine.next_prompt(state) == engine.prompts[ConversationStep.INTERESTS]
