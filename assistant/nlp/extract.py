from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

# Kolejność ma znaczenie: wygrywa pierwsze dopasowanie od góry.
# Nowe języki/sformułowania dopisujemy tutaj, bez zmiany logiki.
BUDGET_KEYWORDS: List[Tuple[str, str]] = [
    ("ekonomik", "low"),
    ("economic", "low"),
    ("low", "low"),
    ("orta", "medium"),
    ("medium", "medium"),
    ("lüks", "high"),
    ("luxury", "high"),
    ("high", "high"),
]

INTEREST_SEPARATOR = ","


def fold_case(text: str) -> str:
    """
    Porównanie bez wielkości liter, odporne na tureckie 'İ'
    (str.lower() zamienia je na 'i' + kropkę łączącą).
    """
    return (text or "").replace("İ", "i").lower()


def match_keyword(text: str, table: Iterable[Tuple[str, str]]) -> Optional[str]:
    """Zwraca wynik pierwszej pary (wzorzec, wynik), której wzorzec jest podciągiem tekstu."""
    haystack = fold_case(text)
    for pattern, result in table:
        if fold_case(pattern) in haystack:
            return result
    return None


def classify_budget(text: str, table: Optional[Sequence[Tuple[str, str]]] = None) -> str:
    """
    Mapuje wypowiedź o budżecie na low/medium/high.
    Bez dopasowania zwraca tekst bez zmian, żeby rozmowa nie utknęła.
    """
    found = match_keyword(text, BUDGET_KEYWORDS if table is None else table)
    return found if found is not None else text


def split_interests(text: str) -> List[str]:
    # "doğa, deniz ,  kültür" -> ["doğa", "deniz", "kültür"]; duplikaty zostają
    return [t.strip() for t in (text or "").split(INTEREST_SEPARATOR) if t.strip()]
