"""Command line for finding the fewest cities that cover a disaster scenario."""

from __future__ import annotations

import argparse
import dataclasses
import os
import sys
from collections.abc import Collection, Mapping

from disasterprep.console import get_yes_or_no, make_file_selection
from disasterprep.parser import DisasterParseError, DisasterTest, load_disaster
from disasterprep.planning import place_emergency_supplies

PROBLEM_SUFFIX = ".dst"
DEFAULT_BASE_PATH = "res/disaster-planning/"

_BUFFER_SPACE = 60.0
_LOGICAL_PADDING = 1e-5
_MAX_LENGTH = 3


@dataclasses.dataclass(frozen=True)
class Geometry:
    """Data-space bounds and the drawing-space box they are mapped onto."""

    min_data_x: float
    min_data_y: float
    max_data_x: float
    max_data_y: float
    min_draw_x: float
    min_draw_y: float
    max_draw_x: float
    max_draw_y: float


def solve_optimally(network: Mapping[str, Collection[str]]) -> set[str]:
    """Binary-search for the smallest covering set of cities and return it."""
    low, high = 0, len(network)
    result = place_emergency_supplies(network, high) or set()

    while low < high:
        mid = low + (high - low) // 2
        attempt = place_emergency_supplies(network, mid)
        if attempt is not None:
            high = mid
            result = attempt
        else:
            low = mid + 1
    return result


def shorthand_for(name: str) -> str:
    """A short label: the first three letters of one word, else initials."""
    if not name:
        raise ValueError("A city name must not be empty.")
    words = name.split(" ")
    if len(words) == 1:
        return words[0][:_MAX_LENGTH]
    return "".join(word[0] for word in words if word)[:_MAX_LENGTH]


def geometry_for(test: DisasterTest, canvas_width: float, canvas_height: float) -> Geometry:
    """Fit the scenario's cities into a canvas, keeping their aspect ratio."""
    if not test.city_locations:
        raise ValueError("There are no cities to lay out.")
    if canvas_width <= 2 * _BUFFER_SPACE or canvas_height <= 2 * _BUFFER_SPACE:
        raise ValueError("The canvas is too small to draw on.")

    xs = [x for x, _ in test.city_locations.values()]
    ys = [y for _, y in test.city_locations.values()]
    min_x, max_x = min(xs) - _LOGICAL_PADDING, max(xs) + _LOGICAL_PADDING
    min_y, max_y = min(ys) - _LOGICAL_PADDING, max(ys) + _LOGICAL_PADDING

    win_width = canvas_width - 2 * _BUFFER_SPACE
    win_height = canvas_height - 2 * _BUFFER_SPACE
    win_aspect = win_width / win_height
    data_aspect = (max_x - min_x) / (max_y - min_y)

    if data_aspect >= win_aspect:
        data_width = win_width
        data_height = data_width / data_aspect
    else:
        data_height = win_height
        data_width = data_aspect * data_height

    min_draw_x = (win_width - data_width) / 2.0 + _BUFFER_SPACE
    min_draw_y = (win_height - data_height) / 2.0 + _BUFFER_SPACE
    return Geometry(
        min_x, min_y, max_x, max_y,
        min_draw_x, min_draw_y, min_draw_x + data_width, min_draw_y + data_height,
    )


def logical_to_physical(point: tuple[float, float], geometry: Geometry) -> tuple[float, float]:
    """Map a point in data space to drawing space."""
    x, y = point
    g = geometry
    px = (x - g.min_data_x) / (g.max_data_x - g.min_data_x) * (g.max_draw_x - g.min_draw_x) + g.min_draw_x
    py = (y - g.min_data_y) / (g.max_data_y - g.min_data_y) * (g.max_draw_y - g.min_draw_y) + g.min_draw_y
    return px, py


def _cities(count: int) -> str:
    return f"{count} {'city' if count == 1 else 'cities'}"


def format_map(network: Mapping[str, Collection[str]]) -> str:
    """Describe a road network, one city and its neighbours at a time."""
    lines = [f"This transportation grid has {_cities(len(network))}."]
    for city in sorted(network):
        neighbors = network[city]
        lines.append(f"  The city {city} is adjacent to {_cities(len(neighbors))}.")
        lines.extend(f"    {neighbor}" for neighbor in sorted(neighbors))
    return "\n".join(lines)


def format_best_cities(cities: Collection[str]) -> str:
    """Describe the cities chosen to hold supplies."""
    lines = [f"You need to stockpile in {_cities(len(cities))} to provide coverage."]
    lines.extend(f"  {city}" for city in sorted(cities))
    return "\n".join(lines)


def sample_problems(base_path: str) -> list[str]:
    """Names of the scenario files in a directory, sorted."""
    return sorted(name for name in os.listdir(base_path) if name.endswith(PROBLEM_SUFFIX))


def _run_scenario(path: str) -> None:
    with open(path, encoding="utf-8") as handle:
        scenario = load_disaster(handle)

    print(format_map(scenario.network))
    print("Running your code to find the fewest number of cities needed... ", end="", flush=True)
    cities = solve_optimally(scenario.network)
    print("done!")
    print(format_best_cities(cities))


def main(argv: list[str] | None = None) -> int:
    """Solve the given scenario files, or pick scenarios interactively."""
    parser = argparse.ArgumentParser(
        prog="disasterprep",
        description="Find the fewest cities to stockpile disaster supplies in.",
    )
    parser.add_argument("files", nargs="*", help="scenario files to solve")
    parser.add_argument(
        "--directory",
        default=DEFAULT_BASE_PATH,
        help="directory to choose scenarios from when no files are given",
    )
    args = parser.parse_args(argv)

    print("Disaster Planning")
    try:
        if args.files:
            for path in args.files:
                _run_scenario(path)
        else:
            while True:
                _run_scenario(make_file_selection(PROBLEM_SUFFIX, args.directory))
                if not get_yes_or_no("Try another demo file? "):
                    break
    except (OSError, DisasterParseError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0