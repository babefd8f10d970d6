"""Store adapters - Implementations of the GraphStorePort.

Available implementations:
- InMemoryGraphStore: Thread-safe, process-local graph holder
"""

from .memory_store import InMemoryGraphStore

__all__ = ["InMemoryGraphStore"]
