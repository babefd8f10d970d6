"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces:
- Graph validation and routing (Dijkstra)
- Graph storage (in-memory, lock guarded)
"""
