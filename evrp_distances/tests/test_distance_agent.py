# evrp_distances/tests/test_distance_agent.py
from concurrent.futures import ThreadPoolExecutor
import pytest

from evrp_distances.agents import DistanceAgent
from evrp_distances.errors import UnknownCustomerError, UnknownNodeError
from evrp_distances.models import Instance, Depot, Customer, ChargingStation


def _abc_instance():
    return Instance(
        depot=Depot(id="D", x=0.0, y=0.0),
        customers=[Customer(id=cid, x=0.0, y=0.0) for cid in ("A", "B", "C")],
        charging_stations=[ChargingStation(id="S", x=0.0, y=0.0)],
    )


_ABC = {
    ("D", "A"): 5.0, ("D", "B"): 3.0, ("D", "C"): 7.0, ("D", "S"): 2.0,
    ("A", "B"): 4.0, ("A", "C"): 9.0, ("B", "C"): 6.0,
    ("A", "S"): 4.0, ("B", "S"): 2.0, ("C", "S"): 6.0,
}


@pytest.fixture
def abc_agent(make_distance, make_predicate):
    inst = _abc_instance()
    return DistanceAgent(inst, distance_fn=make_distance(_ABC), violates_fn=make_predicate(("A", "C")))


def test_forbidden_pair_scenario(abc_agent):
    a_ids = [p.node.id for p in abc_agent.customer_distances["A"]]
    c_ids = [p.node.id for p in abc_agent.customer_distances["C"]]
    assert "B" in a_ids and "C" not in a_ids
    assert "B" in c_ids and "A" not in c_ids
    assert abc_agent.max_distance_to_depot() == 7.0


def test_direct_distance_lookup(abc_agent):
    a, b, c = abc_agent.instance.customers
    s = abc_agent.instance.charging_stations[0]
    d = abc_agent.instance.depot
    assert abc_agent.direct_distance(a, c) == 9.0
    assert abc_agent.direct_distance(s, b) == 2.0
    assert abc_agent.direct_distance(d, d) == 0.0


def test_distance_to_depot(abc_agent):
    assert abc_agent.distance_to_depot(Customer(id="C", x=0.0, y=0.0)) == 7.0
    assert dict(abc_agent.depot_distances) == {"A": 5.0, "B": 3.0, "C": 7.0}


def test_customer_to_customer_distance(abc_agent):
    a, b, c = abc_agent.instance.customers
    assert abc_agent.customer_to_customer_distance(a, b) == 4.0
    assert abc_agent.customer_to_customer_distance(c, b) == 6.0
    # filtered pair contributes nothing
    assert abc_agent.customer_to_customer_distance(a, c) == 0.0
    # ids match case-insensitively
    assert abc_agent.customer_to_customer_distance(b, Customer(id="a", x=0.0, y=0.0)) == 4.0


def test_nearest_customers_single_minimum(abc_agent):
    a, b, c = abc_agent.instance.customers
    assert [(p.node.id, p.distance) for p in abc_agent.nearest_customers(b)] == [("A", 4.0)]
    assert [(p.node.id, p.distance) for p in abc_agent.nearest_customers(a)] == [("B", 4.0)]


def test_nearest_customers_returns_all_ties(make_distance, make_predicate):
    inst = _abc_instance()
    table = dict(_ABC)
    table[("A", "B")] = 3.0
    table[("A", "C")] = 3.0
    agent = DistanceAgent(inst, distance_fn=make_distance(table), violates_fn=make_predicate())
    a = inst.customers[0]
    assert [(p.node.id, p.distance) for p in agent.nearest_customers(a)] == [("B", 3.0), ("C", 3.0)]


def test_nearest_customers_empty_when_everything_filtered(make_distance, make_predicate):
    inst = _abc_instance()
    agent = DistanceAgent(inst, distance_fn=make_distance(_ABC),
                          violates_fn=make_predicate(("A", "B"), ("A", "C")))
    assert agent.nearest_customers(inst.customers[0]) == ()


def test_nearest_charging_stations_ties(small_instance):
    agent = DistanceAgent(small_instance)
    c1 = small_instance.customers[0]
    nearest = agent.nearest_charging_stations(c1)
    assert [p.node.id for p in nearest] == ["S1", "S2"]
    assert nearest[0].distance == nearest[1].distance


def test_nearest_charging_stations_without_stations():
    inst = Instance(depot=Depot(id="D", x=0.0, y=0.0), customers=[Customer(id="A", x=1.0, y=1.0)])
    agent = DistanceAgent(inst)
    assert agent.nearest_charging_stations(inst.customers[0]) == ()


def test_unknown_nodes_raise(abc_agent):
    ghost = Customer(id="Z", x=0.0, y=0.0)
    a = abc_agent.instance.customers[0]
    with pytest.raises(UnknownNodeError):
        abc_agent.direct_distance(a, ghost)
    with pytest.raises(UnknownNodeError):
        abc_agent.charging_candidates_for_edge(ghost, a)
    with pytest.raises(UnknownCustomerError):
        abc_agent.distance_to_depot(ghost)
    with pytest.raises(UnknownCustomerError):
        abc_agent.customer_to_customer_distance(ghost, a)
    with pytest.raises(UnknownCustomerError):
        abc_agent.customer_to_customer_distance(a, ghost)
    with pytest.raises(UnknownCustomerError):
        abc_agent.customer_to_customer_distance(a, abc_agent.instance.charging_stations[0])
    with pytest.raises(UnknownCustomerError):
        abc_agent.nearest_charging_stations(ghost)


def test_non_customer_has_no_customer_list(abc_agent):
    with pytest.raises(UnknownCustomerError):
        abc_agent.nearest_customers(abc_agent.instance.charging_stations[0])
    with pytest.raises(UnknownCustomerError):
        abc_agent.nearest_customers(abc_agent.instance.depot)


def test_failed_query_leaves_tables_intact(abc_agent):
    a, b, _ = abc_agent.instance.customers
    with pytest.raises(UnknownCustomerError):
        abc_agent.distance_to_depot(Customer(id="Z", x=0.0, y=0.0))
    assert abc_agent.distance_to_depot(a) == 5.0
    assert abc_agent.direct_distance(a, b) == 4.0


def test_zero_distance_and_symmetry_for_all_nodes(small_instance):
    agent = DistanceAgent(small_instance)
    nodes = small_instance.nodes
    for x in nodes:
        assert agent.direct_distance(x, x) == 0.0
        for y in nodes:
            assert agent.direct_distance(x, y) == agent.direct_distance(y, x)


def test_max_distance_to_depot_matches_row(small_instance, instances):
    agent = DistanceAgent(small_instance)
    depot = small_instance.depot
    expected = max(agent.direct_distance(depot, x) for x in small_instance.nodes)
    assert agent.max_distance_to_depot() == expected
    assert abs(expected - instances["small"]["expectations"]["max_distance_to_depot"]) < 1e-9


def test_depot_only_instance_is_degenerate_not_an_error():
    inst = Instance(depot=Depot(id="D", x=3.0, y=4.0), customers=[])
    agent = DistanceAgent(inst)
    assert agent.dimension == 1
    assert agent.max_distance_to_depot() == 0.0
    assert agent.charging_candidates_for_edge(inst.depot, inst.depot) == ()


def test_tables_are_read_only(abc_agent):
    with pytest.raises(TypeError):
        abc_agent.customer_distances["A"] = ()
    with pytest.raises(TypeError):
        abc_agent.depot_distances["A"] = 0.0


def test_concurrent_reads_agree(small_instance):
    agent = DistanceAgent(small_instance)
    nodes = small_instance.nodes

    def read_all(_):
        return [
            (agent.direct_distance(a, b), agent.charging_candidates_for_edge(a, b))
            for a in nodes for b in nodes
        ]

    with ThreadPoolExecutor(max_workers=4) as pool:
        results = list(pool.map(read_all, range(8)))
    assert all(r == results[0] for r in results)
