import pytest

from assistant.common.errors import ErrorCode, SelectionIncomplete, UnknownOption
from assistant.conversation import TripPreferences
from assistant.options import (
    Category, DEFAULT_CATALOGUE, RouteStatus, Selections, finalize_route, find_option, generate_options,
)

def _ids(options):
    return {o.id for o in options}

def test_low_budget_keeps_cheap_options():
    opts = generate_options(TripPreferences(budget="low"))
    assert opts and all(o.price <= 500 for o in opts)
    assert _ids(opts) == {"3", "4", "5", "6", "8"}

def test_medium_budget_ceiling():
    opts = generate_options(TripPreferences(budget="medium"))
    assert _ids(opts) == {"2", "3", "4", "5", "6", "7", "8"}

@pytest.mark.parametrize("budget", ["high", "200 dolar gibi", None])
def test_other_budgets_keep_everything(budget):
    assert len(generate_options(TripPreferences(budget=budget))) == len(DEFAULT_CATALOGUE)

def test_find_option_unknown_raises():
    with pytest.raises(UnknownOption) as ei:
        find_option("nope", DEFAULT_CATALOGUE)
    assert ei.value.code is ErrorCode.UNKNOWN_OPTION

def test_selection_replaces_within_category_and_sums():
    sel = Selections()
    sel.select(find_option("1", DEFAULT_CATALOGUE))
    sel.select(find_option("2", DEFAULT_CATALOGUE))  # ten sam hotel -> nadpisuje
    sel.select(find_option("4", DEFAULT_CATALOGUE))
    assert sel.chosen[Category.HOTEL].id == "2"
    assert sel.total_cost() == 1200 + 150
    assert set(sel.missing()) == {Category.ACTIVITY, Category.TRANSPORT}
    assert sel.is_complete() is False

def test_finalize_route_requires_all_categories():
    prefs = TripPreferences(destination="İzmir", budget="medium", duration="3 gün")
    sel = Selections().select(find_option("2", DEFAULT_CATALOGUE))
    with pytest.raises(SelectionIncomplete) as ei:
        finalize_route(prefs, sel)
    assert ei.value.details["missing"] == ["restaurant", "activity", "transport"]

def test_finalize_route_builds_planned_route():
    prefs = TripPreferences(destination="İzmir", budget="medium", duration="3 gün")
    sel = Selections()
    for oid in ("2", "4", "5", "8"):
        sel.select(find_option(oid, DEFAULT_CATALOGUE))
    route = finalize_route(prefs, sel, route_id="r-1")
    assert route.id == "r-1"
    assert route.title == "İzmir Rotası"
    assert route.total_cost == 1200 + 150 + 300 + 100
    assert route.status is RouteStatus.PLANNED
    assert set(route.selections) == set(Category)
