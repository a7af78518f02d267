# assistant/options.py
from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, Field

from assistant.common.config import settings
from assistant.common.errors import SelectionIncomplete, UnknownOption
from assistant.conversation.models import TripPreferences

logger = logging.getLogger(__name__)


class Category(str, Enum):
    HOTEL = "hotel"
    RESTAURANT = "restaurant"
    ACTIVITY = "activity"
    TRANSPORT = "transport"


class Option(BaseModel):
    id: str
    name: str
    description: str
    price: float = Field(..., ge=0)
    image: str = ""
    category: Category
    rating: float = Field(0.0, ge=0, le=5)
    features: List[str] = Field(default_factory=list)


DEFAULT_CATALOGUE: List[Option] = [
    Option(
        id="1", name="Luxury Resort & Spa",
        description="Deniz manzaralı lüks resort, spa ve havuz imkanları",
        price=2500, category=Category.HOTEL, rating=4.8,
        image="https://images.unsplash.com/photo-1566073771259-6a8506099945?auto=format&fit=crop&w=800&q=80",
        features=["Spa", "Havuz", "Restaurant", "WiFi", "Parking"],
    ),
    Option(
        id="2", name="Boutique Hotel",
        description="Şehir merkezinde modern tasarım boutique otel",
        price=1200, category=Category.HOTEL, rating=4.5,
        image="https://images.unsplash.com/photo-1551882547-ff40c63fe5fa?auto=format&fit=crop&w=800&q=80",
        features=["WiFi", "Restaurant", "Bar", "Gym"],
    ),
    Option(
        id="3", name="Fine Dining Restaurant",
        description="Geleneksel lezzetleri modern sunumla birleştiren restoran",
        price=400, category=Category.RESTAURANT, rating=4.7,
        image="https://images.unsplash.com/photo-1517248135467-4c7edcad34c4?auto=format&fit=crop&w=800&q=80",
        features=["Açık Mutfak", "Şarap Listesi", "Teras"],
    ),
    Option(
        id="4", name="Local Cuisine",
        description="Yerel halkın tercih ettiği otantik lezzetler",
        price=150, category=Category.RESTAURANT, rating=4.3,
        image="https://images.unsplash.com/photo-1559339352-11d035aa65de?auto=format&fit=crop&w=800&q=80",
        features=["Geleneksel", "Uygun Fiyat", "Kalabalık"],
    ),
    Option(
        id="5", name="Guided City Tour",
        description="Profesyonel rehber eşliğinde şehir turu",
        price=300, category=Category.ACTIVITY, rating=4.6,
        image="https://images.unsplash.com/photo-1488646953014-85cb44e25828?auto=format&fit=crop&w=800&q=80",
        features=["Rehber", "Ulaşım", "Giriş Ücreti Dahil"],
    ),
    Option(
        id="6", name="Adventure Sports",
        description="Macera dolu outdoor aktiviteler",
        price=500, category=Category.ACTIVITY, rating=4.4,
        image="https://images.unsplash.com/photo-1558618666-fcd25c85cd64?auto=format&fit=crop&w=800&q=80",
        features=["Ekipman", "Eğitmen", "Sigorta"],
    ),
    Option(
        id="7", name="Private Transfer",
        description="Lüks araç ile özel transfer hizmeti",
        price=800, category=Category.TRANSPORT, rating=4.9,
        image="https://images.unsplash.com/photo-1449824913935-59a10b8d2000?auto=format&fit=crop&w=800&q=80",
        features=["Şoför", "Klimalı", "WiFi", "Su"],
    ),
    Option(
        id="8", name="Public Transport Pass",
        description="Şehir içi toplu taşıma kartı",
        price=100, category=Category.TRANSPORT, rating=4.2,
        image="https://images.unsplash.com/photo-1544620347-c4fd4a3d5957?auto=format&fit=crop&w=800&q=80",
        features=["Sınırsız Kullanım", "Ekonomik", "Kolay Erişim"],
    ),
]


def price_ceiling(budget: Optional[str]) -> Optional[float]:
    """Górny limit ceny dla poziomu budżetu; None = bez limitu (high albo surowy tekst)."""
    if budget == "low":
        return settings.budget_low_max
    if budget == "medium":
        return settings.budget_medium_max
    return None


def generate_options(preferences: TripPreferences, catalogue: Optional[Sequence[Option]] = None) -> List[Option]:
    options = list(DEFAULT_CATALOGUE if catalogue is None else catalogue)
    ceiling = price_ceiling(preferences.budget)
    if ceiling is not None:
        options = [o for o in options if o.price <= ceiling]
    logger.info("generated %d options for budget=%r", len(options), preferences.budget)
    return options


def find_option(option_id: str, options: Sequence[Option]) -> Option:
    for o in options:
        if o.id == option_id:
            return o
    raise UnknownOption(details={"option_id": option_id})


class Selections(BaseModel):
    """Po jednym wyborze na kategorię; ponowny wybór w kategorii nadpisuje poprzedni."""

    chosen: Dict[Category, Option] = Field(default_factory=dict)

    def select(self, option: Option) -> "Selections":
        self.chosen[option.category] = option
        return self

    def missing(self) -> List[Category]:
        return [c for c in Category if c not in self.chosen]

    def is_complete(self) -> bool:
        return not self.missing()

    def total_cost(self) -> float:
        return sum(o.price for o in self.chosen.values())


class RouteStatus(str, Enum):
    PLANNED = "planned"
    COMPLETED = "completed"


class PlannedRoute(BaseModel):
    id: str
    title: str
    preferences: TripPreferences
    selections: Dict[Category, Option]
    total_cost: float
    status: RouteStatus = RouteStatus.PLANNED
    created_at: str = Field(default_factory=lambda: datetime.now(timezone.utc).isoformat())


def finalize_route(preferences: TripPreferences, selections: Selections, *, route_id: Optional[str] = None) -> PlannedRoute:
    missing = selections.missing()
    if missing:
        raise SelectionIncomplete(details={"missing": [c.value for c in missing]})

    destination = preferences.destination or "Yeni"
    route = PlannedRoute(
        id=route_id or uuid.uuid4().hex,
        title=f"{destination} Rotası",
        preferences=preferences.model_copy(deep=True),
        selections=dict(selections.chosen),
        total_cost=selections.total_cost(),
    )
    logger.info("route finalized id=%s total_cost=%.2f", route.id, route.total_cost)
    return route
