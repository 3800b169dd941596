"""Read disaster-planning scenarios: city positions and the roads between them."""

from __future__ import annotations

import dataclasses
import re
from collections.abc import Iterable

_CITY_PATTERN = re.compile(
    r"([A-Za-z0-9 .\-]+)\(\s*(-?[0-9]+(?:\.[0-9]+)?)\s*,\s*(-?[0-9]+(?:\.[0-9]+)?)\s*\)"
)


class DisasterParseError(ValueError):
    """Raised when a scenario file is malformed."""


@dataclasses.dataclass
class DisasterTest:
    """A scenario: the road network and where each city is drawn."""

    network: dict[str, set[str]] = dataclasses.field(default_factory=dict)
    city_locations: dict[str, tuple[float, float]] = dataclasses.field(
        default_factory=dict
    )


def _parse_city(city_info: str, result: DisasterTest) -> str:
    match = _CITY_PATTERN.fullmatch(city_info.strip())
    if match is None:
        raise DisasterParseError(f"Can't parse this data; is it city info? {city_info}")

    name = match.group(1).strip()
    if not name:
        raise DisasterParseError("City names can't be empty.")

    result.city_locations[name] = (float(match.group(2)), float(match.group(3)))
    result.network[name] = set()
    return name


def _parse_links(city: str, links: str, result: DisasterTest) -> None:
    if not links.strip():
        result.network[city] = set()
        return

    for dest in links.split(","):
        clean = dest.strip()
        if not clean:
            raise DisasterParseError("Blank name in list of outgoing cities?")
        if clean in result.network[city]:
            raise DisasterParseError("City appears twice in outgoing list?")
        result.network[city].add(clean)


def _parse_city_line(line: str, result: DisasterTest) -> None:
    if line.count(":") != 1:
        raise DisasterParseError("Each data line should have exactly one colon on it.")

    city_info, links = line.split(":")
    name = _parse_city(city_info, result)
    _parse_links(name, links, result)


def _add_reverse_edges(result: DisasterTest) -> None:
    for source, dests in list(result.network.items()):
        for dest in list(dests):
            if dest not in result.network:
                raise DisasterParseError(
                    f"Outgoing link found to nonexistent city '{dest}'"
                )
            result.network[dest].add(source)


def _validate_locations(result: DisasterTest) -> None:
    seen: dict[tuple[float, float], str] = {}
    for name in sorted(result.city_locations):
        location = result.city_locations[name]
        if location in seen:
            raise DisasterParseError(
                f"{name} is at the same location as {seen[location]}"
            )
        seen[location] = name


def load_disaster(source: Iterable[str] | str) -> DisasterTest:
    """Parse a scenario from an open text file, an iterable of lines, or text.

    Each data line reads ``Name (x, y): Neighbour, Neighbour``. Blank lines
    and lines starting with ``#`` are skipped. Roads are made two-way.
    Raises ``DisasterParseError`` on malformed input.
    """
    lines = source.splitlines() if isinstance(source, str) else source
    result = DisasterTest()

    for raw in lines:
        line = raw.rstrip("\r\n")
        if not line.strip() or line.startswith("#"):
            continue
        _parse_city_line(line, result)

    _add_reverse_edges(result)
    _validate_locations(result)
    return result