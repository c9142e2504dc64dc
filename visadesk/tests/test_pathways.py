# visadesk/tests/test_pathways.py
from visadesk.engine.pathways import PATHWAY_EDGES, find_pathways, matches


def _hops(route) -> list[str]:
    return [route.from_scheme] + [e.to_scheme for e in route.edges]


def test_family_prefix_matching():
    assert matches("F-5-16", "F-5")
    assert matches("E-7", "E-7")
    assert not matches("E-7-4", "E-7-4-1")
    assert not matches("F-5", "F-5-16")
    assert matches("F-2-7", "F-2")


def test_e7_to_permanent_residence_goes_through_points_visa():
    routes = find_pathways("E-7", "F-5")
    best = routes[0]
    assert _hops(best) == ["E-7", "F-2-7", "F-5-16"]
    assert best.total_years == 4.0
    assert best.hops == 2
    assert best.difficulty == "moderate"


def test_routes_sorted_by_years_then_hops():
    routes = find_pathways("E-7", "F-5")
    keys = [(r.total_years, r.hops) for r in routes]
    assert keys == sorted(keys)
    assert ["E-7", "F-5-1"] in [_hops(r) for r in routes]


def test_difficulty_is_hardest_edge():
    route = find_pathways("E-9", "F-2-7")[0]
    assert _hops(route) == ["E-9", "E-7-4", "F-2-7"]
    assert route.total_years == 6.0
    assert route.difficulty == "hard"


def test_direct_route_before_equal_length_detour():
    routes = find_pathways("D-2", "E-7")
    assert [_hops(r) for r in routes[:2]] == [["D-2", "E-7"], ["D-2", "D-10-1", "E-7"]]


def test_max_hops_limits_search():
    routes = find_pathways("E-7", "F-5", max_hops=1)
    assert [_hops(r) for r in routes] == [["E-7", "F-5-1"]]


def test_no_route_returns_empty_list():
    assert find_pathways("F-5", "E-7") == []
    assert find_pathways("F-5-16", "F-5") == []


def test_investor_chain():
    route = find_pathways("D-10-2", "F-5")[0]
    assert _hops(route) == ["D-10-2", "D-8-4", "D-8-1", "F-5-5"]
    assert route.total_years == 5.0


def test_route_json_uses_from_and_to():
    data = find_pathways("F-6-1", "F-5")[0].model_dump(by_alias=True)
    assert data["from"] == "F-6-1"
    assert data["to"] == "F-5-2"
    assert data["totalYears"] == 2.0
    assert data["edges"][0]["estimatedYears"] == 2.0


def test_edges_are_curated_and_acyclic_per_route():
    assert len(PATHWAY_EDGES) == 12
    for route in find_pathways("D-2", "F-5", max_hops=6):
        nodes = _hops(route)
        assert len(nodes) == len(set(nodes))
