"""Mushroom dataset exploration: a JSON API server, chart figure builders, routes and pages."""

__version__ = "0.1.0"