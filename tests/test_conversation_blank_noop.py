import pytest

from assistant.conversation import STEP_ORDER, ConversationStep

ANSWERS = ["Kaş", "lüks", "10 gün", "dalış", "pansiyon", "yerel", "otobüs", "macera"]

@pytest.mark.parametrize("blank", ["", "   ", "\t\n"])
def test_blank_answer_changes_nothing_at_any_step(engine, blank):
    state = engine.reset()
    for i, step in enumerate(STEP_ORDER):
        assert state.current_step is step
        prompt_before = engine.next_prompt(state)
        dump_before = state.model_dump()

        after = engine.submit_answer(state, blank)

        assert after.model_dump() == dump_before
        assert engine.next_prompt(after) == prompt_before
        if step is ConversationStep.COMPLETE:
            break
        state = engine.submit_answer(state, ANSWERS[i])
