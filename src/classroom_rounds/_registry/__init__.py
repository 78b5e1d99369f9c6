# Area: Registry
"""Player registry: identities, names and cumulative scores."""

from .player_registry import Player, PlayerRegistry, MAX_NAME_LENGTH, DEMO_NAMES

__all__ = ["Player", "PlayerRegistry", "MAX_NAME_LENGTH", "DEMO_NAMES"]
