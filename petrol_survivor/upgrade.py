"""Level-up offers: new weapons, weapon levels and stat items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Protocol, Sequence, Tuple

from petrol_survivor.rng import Random
from petrol_survivor.stats import StatManager, StatType


class WeaponLike(Protocol):
    id: str
    name: str
    icon_name: str
    level: int
    max_level: int
    context: Any

    def level_description(self, level: int) -> str: ...

    def upgrade(self) -> None: ...


class PlayerLike(Protocol):
    max_health: float
    weapons: Sequence[WeaponLike]
    max_weapons: int

    def heal(self, amount: float) -> None: ...

    def add_weapon(self, weapon: WeaponLike) -> None: ...


class GameLike(Protocol):
    player: Optional[PlayerLike]
    stats: StatManager


ApplyFn = Callable[[Any], None]
WeaponFactory = Callable[[], Optional[WeaponLike]]


@dataclass
class Upgrade:
    title: str
    description: str
    icon_name: str
    apply: ApplyFn


@dataclass(frozen=True)
class ItemOffer:
    id: str
    title: str
    description: str
    icon_name: str
    apply: ApplyFn


def _apply_heart(game: GameLike) -> None:
    player = game.player
    if player is None:
        return
    player.max_health += 20.0
    player.heal(20.0)


def _apply_golden_heart(game: GameLike) -> None:
    player = game.player
    if player is None:
        return
    player.max_health += 10.0
    player.heal(10.0)
    game.stats.add_multiplier(StatType.HEALTH_REGEN, 0.2)


def _apply_running_shoe(game: GameLike) -> None:
    stats = game.stats
    stats.set_multiplier(StatType.SPEED, stats.get_multiplier(StatType.SPEED) * 1.10)


_ITEM_POOL: Tuple[ItemOffer, ...] = (
    ItemOffer(
        id="heart",
        title="Heart",
        description="Increase max health by 20.",
        icon_name="icon_heart",
        apply=_apply_heart,
    ),
    ItemOffer(
        id="golden_heart",
        title="Golden Heart",
        description="Increase max health by 10 and health regen by 0.2/sec.",
        icon_name="icon_golden_heart",
        apply=_apply_golden_heart,
    ),
    ItemOffer(
        id="running_shoe",
        title="Running Shoe",
        description="Increase movement speed by 10%.",
        icon_name="icon_running_shoe",
        apply=_apply_running_shoe,
    ),
)


def item_pool() -> Tuple[ItemOffer, ...]:
    """The stat items that are always on offer."""
    return _ITEM_POOL


def _find_weapon(player: PlayerLike, weapon_id: str) -> Optional[WeaponLike]:
    return next((w for w in player.weapons if w and w.id == weapon_id), None)


def _level_up_weapon(weapon_id: str) -> ApplyFn:
    def apply(game: GameLike) -> None:
        player = game.player
        if player is None:
            return
        weapon = _find_weapon(player, weapon_id)
        if weapon is not None:
            weapon.upgrade()

    return apply


def _equip_new_weapon(factory: WeaponFactory) -> ApplyFn:
    def apply(game: GameLike) -> None:
        player = game.player
        if player is None or len(player.weapons) >= player.max_weapons:
            return
        weapon = factory()
        if weapon is None:
            return
        weapon.context = game
        player.add_weapon(weapon)

    return apply


def _candidates(
    player: PlayerLike, weapon_factories: Iterable[WeaponFactory]
) -> List[Upgrade]:
    pool: List[Upgrade] = []
    has_free_slot = len(player.weapons) < player.max_weapons

    for factory in weapon_factories:
        proto = factory()
        if proto is None:
            continue
        existing = _find_weapon(player, proto.id)
        if existing is not None:
            if existing.level >= existing.max_level:
                continue
            next_level = existing.level + 1
            pool.append(
                Upgrade(
                    title=f"{existing.name} (Lv {next_level})",
                    description=existing.level_description(next_level),
                    icon_name=existing.icon_name,
                    apply=_level_up_weapon(proto.id),
                )
            )
        elif has_free_slot:
            pool.append(
                Upgrade(
                    title=f"{proto.name} (New)",
                    description=proto.level_description(1),
                    icon_name=proto.icon_name,
                    apply=_equip_new_weapon(factory),
                )
            )

    pool.extend(
        Upgrade(item.title, item.description, item.icon_name, item.apply)
        for item in item_pool()
    )
    return pool


def generate_upgrades(
    game: GameLike,
    count: int = 3,
    weapon_factories: Iterable[WeaponFactory] = (),
    rng: Optional[Random] = None,
) -> List[Upgrade]:
    """Pick up to ``count`` distinct offers for the player's next level-up.

    Offers are new weapons while slots remain, one more level for each equipped
    weapon below its maximum, and every stat item.
    """
    player = game.player
    if player is None:
        return []

    pool = _candidates(player, weapon_factories)
    if not pool:
        return []

    rng = rng if rng is not None else Random()
    order = list(range(len(pool)))
    for i in range(len(order)):
        j = rng.rand_int(0, len(order) - 1)
        order[i], order[j] = order[j], order[i]

    return [pool[index] for index in order[: max(0, min(count, len(pool)))]]