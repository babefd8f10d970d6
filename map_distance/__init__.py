"""Top-level package for the Map Distance service.

Accepts a weighted, undirected map of named locations, keeps it as
shared process state, and answers shortest-route and shortest-distance
queries between two locations.
"""

__version__ = "0.1.0"
