# disasterprep

Decide where to stockpile disaster supplies in a road network.

Each city must either hold supplies itself or sit next to a city that
does. Given a budget of cities, `disasterprep` searches for a placement
that fits within that budget. It can also find the smallest placement
that works.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Placing supplies

A road network maps each city name to the collection of cities it has a
road to. Roads go both ways, so each road appears under both of its
cities.

```python
from disasterprep.planning import place_emergency_supplies, is_covered
from disasterprep.cli import solve_optimally

network = {
    "A": {"B"},
    "B": {"A", "C"},
    "C": {"B"},
}

place_emergency_supplies(network, 1)   # {"B"}
place_emergency_supplies(network, 0)   # None: no placement fits the budget
is_covered("A", network, {"B"})        # True
solve_optimally(network)               # {"B"}
```

- `disasterprep.planning.place_emergency_supplies(road_network, num_cities)`
  returns a set of at most `num_cities` cities that covers every city, or
  `None` when no such set exists. Cities are decided in sorted order, and
  the first covering placement found is returned. A negative budget raises
  `ValueError`.
- `disasterprep.planning.is_covered(city, road_network, supply_locations)`
  tells whether a city holds supplies or borders a city that does.
- `disasterprep.cli.solve_optimally(network)` searches over the budget
  and returns the smallest covering set (an empty set for an empty
  network).

## Scenario files

Scenarios are plain text files with the `.dst` suffix. Each line names a
city, gives the position it is drawn at, and after a single colon lists
the cities it has roads to, separated by commas:

```
# A small example
Alpha (0, 0): Beta
Beta (1, 0): Gamma
Gamma (2, 0):
```

Blank lines and lines starting with `#` are ignored. Roads only need to be
listed once; the reverse direction is added when the file is read.

`disasterprep.parser.load_disaster(source)` takes an open text file, an
iterable of lines, or a string, and returns a `DisasterTest` with two
fields: `network` (city name to set of neighbours) and `city_locations`
(city name to an `(x, y)` tuple). It raises `DisasterParseError` (a
`ValueError`) when a line has no colon or more than one, a city entry
cannot be read, a neighbour is blank or listed twice, a road leads to a
city that is never defined, or two cities share a location.

## Command line

```
disasterprep
```

With no arguments the command lists the `.dst` files in
`res/disaster-planning/` (change this with `--directory DIR`), asks you to
pick one by number, prints the road network, and reports the fewest cities
needed to cover it. It then asks whether you want to try another file.

Scenario files can also be named directly:

```
disasterprep first.dst second.dst
```

Each file is solved in turn without prompting. If a file cannot be read
or parsed, the command prints the error and exits with status 1.

## Other modules

- `disasterprep.cli` also has `format_map` and `format_best_cities`,
  which produce the text the command prints, `shorthand_for`, which makes
  a label of up to three characters from a city name, `sample_problems`,
  which lists the scenario files in a directory, and `geometry_for` and
  `logical_to_physical`, which fit city locations into a canvas of a given
  size and map points onto it.
- `disasterprep.console` has the prompts the command uses:
  `make_selection_from`, `make_file_selection` and `get_yes_or_no`.
- `disasterprep.color.Color` is an immutable RGB colour with
  `from_hex`, `from_hsv`, `random`, `to_rgb`, `to_html` and preset
  colours such as `Color.WHITE` and `Color.GRAY`.
- `disasterprep.font.Font` is an immutable font description (family,
  style, size, colour) with `with_family`, `with_style`, `with_size`,
  `with_color` and `font_string`.
- `disasterprep.colorconsole.ColorConsole` is a file-like object that
  records text in styled runs. Change the style with `set_style`, or for
  a block with the `styled` context manager, and get the whole contents
  as an HTML page with `render_html`.
- `disasterprep.shift` models work shifts: `Day` and `Shift`, with
  `overlaps_with`, `length` and `profit`.

## What it does not do

There is no graphical display. The layout helpers compute where cities
would go on a canvas, but nothing draws the network. The `shift` module
only describes shifts; the package does not choose a schedule from them.