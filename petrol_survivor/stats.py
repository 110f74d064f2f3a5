"""Player stat multipliers."""

from __future__ import annotations

from enum import Enum

from petrol_survivor.enum_map import EnumMap


class StatType(Enum):
    MIGHT = 0  # damage multiplier
    AREA = 1  # size multiplier
    COOLDOWN = 2  # cooldown multiplier; lower is faster
    SPEED = 3  # projectile and player speed multiplier
    AMOUNT = 4  # extra projectiles, additive
    MAGNET = 5  # pickup radius multiplier
    HEALTH_REGEN = 6
    CRIT_CHANCE = 7
    CRIT_MULTIPLIER = 8


_DEFAULTS = {
    StatType.MIGHT: 1.0,
    StatType.AREA: 1.0,
    StatType.COOLDOWN: 1.0,
    StatType.SPEED: 1.0,
    StatType.AMOUNT: 0.0,
    StatType.MAGNET: 1.0,
    StatType.HEALTH_REGEN: 0.0,
    StatType.CRIT_CHANCE: 0.05,
    StatType.CRIT_MULTIPLIER: 2.0,
}


class StatManager:
    """Holds one value per stat, starting from the game's defaults."""

    def __init__(self) -> None:
        self._stats: EnumMap[StatType, float] = EnumMap(StatType, _DEFAULTS, 0.0)

    def get_multiplier(self, stat: StatType) -> float:
        return self._stats[stat]

    def add_multiplier(self, stat: StatType, value: float) -> None:
        """Add ``value`` to a stat (0.1 on MIGHT means ten percent more)."""
        self._stats[stat] += value

    def set_multiplier(self, stat: StatType, value: float) -> None:
        self._stats[stat] = value