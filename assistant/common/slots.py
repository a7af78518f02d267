# assistant/common/slots.py
CANONICAL_SLOTS: tuple[str, ...] = (
    "destination",
    "budget",
    "duration",
    "interests",
    "accommodation",
    "food",
    "transport",
    "travelStyle",
)

# minimalny zestaw, po którym oddajemy sterowanie do wyboru opcji
REQUIRED_SLOTS: tuple[str, ...] = ("destination", "budget", "duration")

BUDGET_LEVELS: set[str] = {"low", "medium", "high"}
