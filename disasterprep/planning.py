"""Choose cities to stockpile disaster supplies so every city is covered."""

from __future__ import annotations

from collections.abc import Collection, Mapping

RoadNetwork = Mapping[str, Collection[str]]


def is_covered(
    city: str, road_network: RoadNetwork, supply_locations: Collection[str]
) -> bool:
    """Return whether ``city`` holds supplies or borders a city that does."""
    if city in supply_locations:
        return True
    return any(neighbor in supply_locations for neighbor in road_network.get(city, ()))


def place_emergency_supplies(
    road_network: RoadNetwork, num_cities: int
) -> set[str] | None:
    """Find at most ``num_cities`` cities whose supplies cover the whole network.

    Cities are decided in sorted order. Each city is first left without
    supplies, and only then given supplies. The first placement that covers
    every city is returned. Returns ``None`` when no such placement exists.
    Raises ``ValueError`` if ``num_cities`` is negative.
    """
    if num_cities < 0:
        raise ValueError("The number of cities must not be negative.")

    cities = sorted(road_network)
    position = {city: index for index, city in enumerate(cities)}

    # The cities that could cover each city: itself and its listed neighbours.
    candidates = {
        city: {city} | {n for n in road_network[city] if n in position}
        for city in cities
    }
    covers: dict[str, list[str]] = {city: [] for city in cities}
    for city, sources in candidates.items():
        for source in sources:
            covers[source].append(city)

    # A city can no longer be covered once every one of its candidates is decided.
    last_chance: list[list[str]] = [[] for _ in cities]
    for city, sources in candidates.items():
        last_chance[max(position[s] for s in sources)].append(city)

    max_reach = max((len(covered) for covered in covers.values()), default=0)
    coverage = dict.fromkeys(cities, 0)
    chosen: list[str] = []
    uncovered = len(cities)

    def place(city: str) -> None:
        nonlocal uncovered
        chosen.append(city)
        for target in covers[city]:
            if coverage[target] == 0:
                uncovered -= 1
            coverage[target] += 1

    def unplace(city: str) -> None:
        nonlocal uncovered
        chosen.pop()
        for target in covers[city]:
            coverage[target] -= 1
            if coverage[target] == 0:
                uncovered += 1

    def still_possible(index: int) -> bool:
        if any(coverage[city] == 0 for city in last_chance[index]):
            return False
        return uncovered <= (num_cities - len(chosen)) * max_reach

    def search(index: int) -> bool:
        if index == len(cities):
            return uncovered == 0

        if still_possible(index) and search(index + 1):
            return True

        if len(chosen) < num_cities:
            city = cities[index]
            place(city)
            if still_possible(index) and search(index + 1):
                return True
            unplace(city)

        return False

    if search(0):
        return set(chosen)
    return None