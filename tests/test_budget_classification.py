import pytest

from assistant.conversation import ConversationEngine, ConversationStep
from assistant.nlp.extract import classify_budget, fold_case

@pytest.mark.parametrize("text,expected", [
    ("ekonomik", "low"),
    ("EKONOMİK olsun", "low"),
    ("Ekonomik bir tatil", "low"),
    ("economic please", "low"),
    ("orta", "medium"),
    ("ORTA seviye", "medium"),
    ("medium", "medium"),
    ("lüks", "high"),
    ("LÜKS istiyorum", "high"),
    ("luxury", "high"),
    ("high end", "high"),
])
def test_budget_keywords(text, expected):
    assert classify_budget(text) == expected

def test_budget_without_keyword_is_kept_verbatim():
    assert classify_budget("200 dolar gibi") == "200 dolar gibi"

def test_first_matching_row_wins():
    # "ekonomik" stoi w tabeli przed "lüks"
    assert classify_budget("lüks değil, ekonomik") == "low"

def test_fold_case_handles_turkish_dotted_capital():
    assert fold_case("EKONOMİK") == "ekonomik"

def test_engine_budget_step_uses_table(engine):
    state = engine.submit_answer(engine.reset(), "Muğla")
    assert engine.submit_answer(state, "200 dolar gibi").preferences.budget == "200 dolar gibi"
    assert engine.submit_answer(state, "Lüks").preferences.budget == "high"

def test_custom_keyword_table_extends_matching():
    table = [("günstig", "low"), ("teuer", "high")]
    eng = ConversationEngine(budget_keywords=table)
    state = eng.submit_answer(eng.reset(), "Berlin")
    state = eng.submit_answer(state, "eher günstig")
    assert state.preferences.budget == "low"
    assert state.current_step is ConversationStep.DURATION
