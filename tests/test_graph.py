import pytest

from towngraph.domain.errors import DuplicateRoadError, InvalidRoadError, TownNotFoundError
from towngraph.domain.models import PathOutcome, Road, Town
from towngraph.graph import Graph, dijkstra


A, B, C, D = Town("A"), Town("B"), Town("C"), Town("D")


def build(*roads):
    graph = Graph()
    for town1, town2, weight, name in roads:
        graph.add_vertex(town1)
        graph.add_vertex(town2)
        graph.add_edge(town1, town2, weight, name)
    return graph


def test_towns_are_equal_by_name():
    assert Town("Ada, Lovelace") == Town("Ada, Lovelace")
    assert len({Town("X"), Town("X")}) == 1


def test_town_rejects_empty_name():
    with pytest.raises(ValueError):
        Town("")


def test_road_equality_ignores_endpoint_order():
    assert Road(A, B, 3, "r") == Road(B, A, 9, "other")
    assert hash(Road(A, B, 3, "r")) == hash(Road(B, A, 3, "r"))


def test_road_describe_follows_direction():
    road = Road(A, B, 4, "Main")
    assert road.describe(A) == "A via Main to B 4 mi"
    assert road.describe(B) == "B via Main to A 4 mi"


def test_add_vertex_only_once():
    graph = Graph()
    assert graph.add_vertex(A) is True
    assert graph.add_vertex(Town("A")) is False
    assert graph.add_vertex(None) is False
    assert graph.vertex_set() == {A}


def test_add_edge_visible_from_both_ends():
    graph = build((A, B, 5, "ab"))

    road = graph.get_edge(B, A)
    assert road is graph.get_edge(A, B)
    assert road.name == "ab"
    assert graph.edges_of(A) == {road}
    assert graph.edges_of(B) == {road}
    assert graph.edge_set() == {road}


def test_add_edge_requires_existing_towns():
    graph = Graph()
    graph.add_vertex(A)

    with pytest.raises(TownNotFoundError) as exc:
        graph.add_edge(A, B, 1, "ab")

    assert exc.value.town_name == "B"
    assert graph.edge_set() == set()


def test_add_edge_rejects_self_loop_and_negative_weight():
    graph = Graph()
    graph.add_vertex(A)
    graph.add_vertex(B)

    with pytest.raises(InvalidRoadError):
        graph.add_edge(A, A, 1, "loop")
    with pytest.raises(InvalidRoadError):
        graph.add_edge(A, B, -1, "negative")
    with pytest.raises(InvalidRoadError):
        graph.add_edge(A, None, 1, "nowhere")

    assert graph.edge_count == 0


def test_add_edge_rejects_duplicate_pair():
    graph = build((A, B, 5, "first"))

    with pytest.raises(DuplicateRoadError) as exc:
        graph.add_edge(B, A, 1, "second")

    assert exc.value.existing_road == "first"
    assert graph.get_edge(A, B).name == "first"


def test_get_edge_unknown_towns_returns_none():
    graph = build((A, B, 5, "ab"))

    assert graph.get_edge(A, C) is None
    assert graph.get_edge(C, D) is None
    assert graph.contains_edge(A, C) is False


def test_remove_edge_checks_weight_and_name():
    graph = build((A, B, 5, "ab"))

    assert graph.remove_edge(A, B, 6, "ab") is False
    assert graph.remove_edge(A, B, 5, "other") is False
    assert graph.contains_edge(A, B)

    assert graph.remove_edge(B, A, 5, "ab") is True
    assert graph.contains_edge(A, B) is False
    assert graph.edges_of(A) == set()
    assert graph.remove_edge(A, B) is False


def test_remove_vertex_drops_incident_edges():
    graph = build((A, B, 1, "ab"), (B, C, 1, "bc"), (C, D, 1, "cd"))

    assert graph.remove_vertex(B) is True

    assert B not in graph
    assert {road.name for road in graph.edge_set()} == {"cd"}
    assert graph.edges_of(A) == set()
    assert graph.remove_vertex(B) is False


def test_dijkstra_finds_direct_edge():
    graph = build((A, B, 10, "ab"))

    assert graph.shortest_path(A, B) == ["A via ab to B 10 mi"]


def test_dijkstra_chooses_shortest_path():
    # A can reach C directly, but A->B->C is shorter
    graph = build((A, B, 3, "ab"), (A, C, 10, "ac"), (B, C, 4, "bc"))

    result = graph.find_path(A, C)

    assert result.outcome is PathOutcome.FOUND
    assert result.hops == ("A via ab to B 3 mi", "B via bc to C 4 mi")
    assert result.total_distance == 7


def test_dijkstra_walks_roads_backwards():
    graph = build((B, A, 2, "ba"), (C, B, 2, "cb"))

    assert graph.shortest_path(A, C) == ["A via ba to B 2 mi", "B via cb to C 2 mi"]


def test_dijkstra_ties_follow_insertion_order():
    graph = build((A, B, 1, "ab"), (A, C, 1, "ac"), (B, D, 1, "bd"), (C, D, 1, "cd"))

    assert graph.shortest_path(A, D) == ["A via ab to B 1 mi", "B via bd to D 1 mi"]


def test_dijkstra_no_path_returns_none():
    graph = build((A, B, 1, "ab"), (C, D, 1, "cd"))

    assert graph.shortest_path(A, D) is None
    assert graph.find_path(A, D).outcome is PathOutcome.UNREACHABLE


def test_dijkstra_unknown_town_is_not_found():
    graph = build((A, B, 1, "ab"))

    assert graph.shortest_path(A, Town("Z")) is None
    assert graph.find_path(A, Town("Z")).outcome is PathOutcome.NOT_FOUND
    assert dijkstra({}, A, B).outcome is PathOutcome.NOT_FOUND


def test_dijkstra_same_town_has_no_hops():
    graph = build((A, B, 1, "ab"))

    result = graph.find_path(A, A)

    assert result.is_found
    assert result.num_hops == 0
    assert graph.shortest_path(A, A) == []


def test_zero_weight_roads_are_allowed():
    graph = build((A, B, 0, "free"), (B, C, 0, "also free"), (A, C, 1, "toll"))

    result = graph.find_path(A, C)

    assert result.total_distance == 0
    assert [road.name for road in result.roads] == ["free", "also free"]


@pytest.mark.parametrize("name", [None, "", 42])
def test_road_rejects_invalid_name(name):
    with pytest.raises(InvalidRoadError):
        Road(A, B, 1, name)


@pytest.mark.parametrize("name", [None, "", 42])
def test_add_edge_rejects_invalid_road_name(name):
    graph = Graph()
    graph.add_vertex(A)
    graph.add_vertex(B)

    with pytest.raises(InvalidRoadError):
        graph.add_edge(A, B, 1, name)

    assert graph.edge_set() == set()
    assert graph.edges_of(A) == set()


@pytest.mark.parametrize("bad", [None, "A", ["A"], {"A": 1}])
def test_non_town_arguments_are_absent(bad):
    graph = build((A, B, 1, "ab"))

    assert graph.contains_vertex(bad) is False
    assert bad not in graph
    assert graph.remove_vertex(bad) is False
    assert graph.edges_of(bad) == set()
    assert graph.get_edge(bad, A) is None
    assert graph.get_edge(A, bad) is None
    assert graph.contains_edge(bad, bad) is False
    assert graph.remove_edge(A, bad) is False
    assert graph.shortest_path(bad, A) is None
    assert graph.find_path(A, bad).outcome is PathOutcome.NOT_FOUND
    assert graph.vertex_count == 2


def test_counts_track_mutations():
    graph = build((A, B, 1, "ab"), (B, C, 1, "bc"))
    assert (graph.vertex_count, graph.edge_count, len(graph)) == (3, 2, 3)

    graph.remove_vertex(B)

    assert (graph.vertex_count, graph.edge_count, len(graph)) == (2, 0, 2)
