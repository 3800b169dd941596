"""Plan emergency supply stockpiles so that every city in a road network is covered."""

__version__ = "0.1.0"