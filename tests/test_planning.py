from itertools import permutations

import pytest

from disasterprep.planning import is_covered, place_emergency_supplies


def make_symmetric(network):
    result = {city: set(neighbors) for city, neighbors in network.items()}
    for city, neighbors in network.items():
        for neighbor in neighbors:
            result.setdefault(neighbor, set()).add(city)
    return result


DONT_BE_GREEDY = make_symmetric(
    {
        "A": {"B"},
        "B": {"C", "D"},
        "C": {"D"},
        "D": {"F", "G"},
        "E": {"F"},
        "F": {"G"},
    }
)


def test_negative_count_raises():
    with pytest.raises(ValueError):
        place_emergency_supplies({}, -137)


def test_map_with_no_cities():
    assert place_emergency_supplies({}, 0) == set()
    assert place_emergency_supplies({}, 137) == set()


def test_one_city():
    network = make_symmetric({"Solipsist": set()})
    assert place_emergency_supplies(network, 0) is None
    assert place_emergency_supplies(network, 1) == {"Solipsist"}
    assert place_emergency_supplies(network, 2) == {"Solipsist"}


def test_two_linked_cities():
    network = make_symmetric({"A": {"B"}})
    assert place_emergency_supplies(network, 0) is None

    one = place_emergency_supplies(network, 1)
    assert one is not None
    assert len(one) == 1
    assert one <= {"A", "B"}

    two = place_emergency_supplies(network, 2)
    assert two is not None
    assert len(two) <= 2
    assert two <= {"A", "B"}


def test_four_disconnected_cities():
    network = make_symmetric({"A": set(), "B": set(), "C": set(), "D": set()})
    for count in range(4):
        assert place_emergency_supplies(network, count) is None
    assert place_emergency_supplies(network, 4) == {"A", "B", "C", "D"}


def test_ethene_regardless_of_ordering():
    for cities in permutations("ABCDEF"):
        network = make_symmetric(
            {
                cities[2]: {cities[0], cities[1], cities[3]},
                cities[3]: {cities[4], cities[5]},
            }
        )
        assert place_emergency_supplies(network, 2) == {cities[2], cities[3]}
        assert place_emergency_supplies(network, 1) is None


def test_six_cities_in_a_line_regardless_of_ordering():
    for cities in permutations("ABCDEF"):
        network = make_symmetric(
            {cities[i]: {cities[i - 1], cities[i + 1]} for i in range(1, len(cities) - 1)}
        )
        chosen = place_emergency_supplies(network, 2)
        assert chosen is not None
        assert len(chosen) == 2
        assert cities[1] in chosen
        assert cities[4] in chosen
        assert place_emergency_supplies(network, 1) is None


def test_dont_be_greedy():
    assert place_emergency_supplies(DONT_BE_GREEDY, 0) is None
    assert place_emergency_supplies(DONT_BE_GREEDY, 1) is None
    assert place_emergency_supplies(DONT_BE_GREEDY, 2) == {"B", "F"}


def test_dont_be_greedy_regardless_of_ordering():
    for cities in permutations("ABCDEFG"):
        network = make_symmetric(
            {
                cities[1]: {cities[0], cities[2], cities[5]},
                cities[2]: {cities[3], cities[5], cities[6]},
                cities[3]: {cities[4], cities[6]},
            }
        )
        assert place_emergency_supplies(network, 2) == {cities[1], cities[3]}
        assert place_emergency_supplies(network, 1) is None


def test_six_by_six_grid():
    rows = "ABCDEF"
    grid = {}
    for r, row in enumerate(rows):
        for col in range(1, 7):
            name = f"{row}{col}"
            neighbors = grid.setdefault(name, set())
            if r + 1 < len(rows):
                neighbors.add(f"{rows[r + 1]}{col}")
            if col < 6:
                neighbors.add(f"{row}{col + 1}")
    grid = make_symmetric(grid)

    locations = place_emergency_supplies(grid, 10)
    assert locations is not None
    assert len(locations) <= 10
    for city in grid:
        assert is_covered(city, grid, locations)


def test_is_covered_directly_and_indirectly():
    network = make_symmetric({"A": {"B"}, "C": set()})
    assert is_covered("A", network, {"A"})
    assert is_covered("B", network, {"A"})
    assert not is_covered("C", network, {"A"})


def test_result_covers_every_city():
    result = place_emergency_supplies(DONT_BE_GREEDY, 3)
    assert result is not None
    assert len(result) <= 3
    assert all(is_covered(city, DONT_BE_GREEDY, result) for city in DONT_BE_GREEDY)


def test_repeated_calls_return_same_answer():
    first = place_emergency_supplies(DONT_BE_GREEDY, 2)
    second = place_emergency_supplies(DONT_BE_GREEDY, 2)
    assert first == second == {"B", "F"}