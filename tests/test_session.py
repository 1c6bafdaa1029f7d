"""Tests for the FlightNetwork query surface."""

import itertools

from skyroute import FlightNetwork, NetworkState, QueryStatus
from skyroute.config import Config


CITIES = [(1, "Alpha"), (2, "Beta"), (3, "Gamma")]
ROUTES = [(1, 2, 5), (2, 3, 3), (1, 3, 100)]


def make_network(cities=CITIES, routes=ROUTES, **kwargs) -> FlightNetwork:
    kwargs.setdefault("verbose", False)
    return FlightNetwork.build(cities, routes, **kwargs)


def test_cheapest_path_takes_two_hops_over_expensive_direct_route():
    network = make_network()

    result = network.cheapest_path(1, 3)

    assert result.status is QueryStatus.OK
    assert result.cities == ["Alpha", "Beta", "Gamma"]
    assert result.positions == [0, 1, 2]
    assert result.total_cost == 8
    assert result.summary() == "Alpha -> Beta -> Gamma (total cost 8)"


def test_removing_the_cheap_leg_falls_back_to_direct_route():
    network = make_network(routes=[(1, 2, 5), (1, 3, 100)])

    result = network.cheapest_path(1, 3)

    assert result.cities == ["Alpha", "Gamma"]
    assert result.total_cost == 100


def test_direct_connections_follow_route_order():
    network = make_network()

    result = network.direct_connections(1)

    assert result.ok
    assert result.city == "Alpha"
    assert result.connections == ["Beta", "Gamma"]


def test_direct_connections_keep_parallel_routes():
    network = make_network(routes=[(1, 2, 5), (1, 2, 7)])

    assert network.direct_connections(2).connections == ["Alpha", "Alpha"]


def test_direct_connections_for_unknown_or_isolated_city():
    network = make_network(cities=CITIES + [(4, "Delta")])

    missing = network.direct_connections(42)
    assert missing.status is QueryStatus.NOT_FOUND
    assert missing.connections == []

    isolated = network.direct_connections(4)
    assert isolated.ok
    assert isolated.connections == []


def test_not_found_outcomes_are_distinct_from_no_path():
    network = make_network(cities=CITIES + [(4, "Delta")])

    assert network.cheapest_path(1, 99).status is QueryStatus.DESTINATION_NOT_FOUND
    assert network.cheapest_path(99, 1).status is QueryStatus.SOURCE_NOT_FOUND
    assert network.cheapest_path(99, 98).status is QueryStatus.SOURCE_NOT_FOUND
    assert network.cheapest_path(1, 99).summary() == "Destination not found."

    no_path = network.cheapest_path(1, 4)
    assert no_path.status is QueryStatus.NO_PATH
    assert no_path.cities == []
    assert no_path.total_cost is None
    assert network.cheapest_path(4, 2).status is QueryStatus.NO_PATH


def test_isolated_city_reaches_itself_at_zero_cost():
    network = make_network(cities=CITIES + [(4, "Delta")])

    result = network.cheapest_path(4, 4)

    assert result.ok
    assert result.cities == ["Delta"]
    assert result.total_cost == 0


def test_costs_are_symmetric_and_queries_repeatable():
    network = make_network(
        cities=[(i, f"C{i}") for i in range(1, 6)],
        routes=[(1, 2, 4), (2, 3, 1), (3, 4, 7), (1, 4, 15), (4, 5, 2), (2, 5, 20)],
    )

    for a, b in itertools.product(range(1, 6), repeat=2):
        forward = network.cheapest_path(a, b)
        backward = network.cheapest_path(b, a)
        assert forward.total_cost == backward.total_cost
        assert network.cheapest_path(a, b) == forward


def test_list_entities_and_links():
    network = make_network()

    assert network.list_entities() == CITIES
    links = network.list_links()
    assert len(links) == 2 * len(ROUTES)
    assert links[:2] == [("Alpha", "Beta", 5), ("Alpha", "Gamma", 100)]
    assert ("Gamma", "Alpha", 100) in links


def test_history_records_successful_queries_newest_first():
    network = make_network()

    network.list_entities()
    network.direct_connections(2)
    network.cheapest_path(1, 3)
    network.cheapest_path(1, 99)       # not recorded
    network.direct_connections(42)     # not recorded
    network.list_links()

    assert network.log_entries() == [
        "Viewed all routes",
        "Found cheapest flight path from Alpha to Gamma",
        "Viewed direct connections of Beta",
        "Viewed all cities",
    ]

    network.log_clear()
    assert network.log_entries() == []

    network.cheapest_path(3, 1)
    assert network.log_entries() == ["Found cheapest flight path from Gamma to Alpha"]


def test_build_drops_bad_records_and_applies_city_cap():
    network = make_network(
        cities=[(1, "Alpha"), (2, "Beta"), (1, "Again"), (3, "Gamma"), (4, "Delta")],
        routes=[(1, 2, 1), (2, 4, 1), (3, 9, 1)],
        max_cities=3,
    )

    assert network.list_entities() == CITIES
    assert network.graph.route_count == 1
    assert network.cheapest_path(1, 4).status is QueryStatus.DESTINATION_NOT_FOUND


def test_build_uses_configured_city_cap(monkeypatch):
    monkeypatch.setattr(Config, "MAX_CITIES", 2)

    network = make_network()

    assert [name for _, name in network.list_entities()] == ["Alpha", "Beta"]


def test_verbose_build_prints_load_summary(capsys, monkeypatch):
    monkeypatch.setenv("SKYROUTE_NO_COLOR", "1")

    make_network(
        cities=CITIES + [(2, "Duplicate")],
        routes=ROUTES + [(1, 42, 3)],
        verbose=True,
    )
    out = capsys.readouterr().out

    assert "[✓] Loaded 3 cities." in out
    assert "[i] Skipped 1 duplicate city record(s)." in out
    assert "[✓] Loaded 3 routes (undirected)." in out
    assert "[i] Skipped 1 route(s) naming unknown cities." in out


def test_from_state_builds_equivalent_network():
    state = NetworkState.model_validate(
        {
            "cities": [{"external_id": i, "display_name": name} for i, name in CITIES],
            "routes": [
                {"source_id": a, "destination_id": b, "cost": c} for a, b, c in ROUTES
            ],
        }
    )

    network = FlightNetwork.from_state(state, verbose=False)

    assert network.cheapest_path(1, 3).total_cost == 8
