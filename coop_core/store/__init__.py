"""In-memory registries for cooperative members and accounts."""

from coop_core.store.cooperative import Cooperative

__all__ = ["Cooperative"]
