"""Gridiron beerball game tracker."""

__version__ = "0.1.0"
