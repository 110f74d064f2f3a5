# petrol_survivor

The gameplay core of a top-down survivor arcade game, with no rendering code.
It holds the rules that decide what happens during a run:

- `petrol_survivor.aabb`: `Vec3`, an immutable 3D vector (`length`,
  `normalized`, `dot`, `cross`, arithmetic), and `AABB`, an axis-aligned box
  with `center`, `size`, `intersects`, `contains`, `closest_point`, `grow`,
  `translate`, `transform` (4x4 matrix), `empty` and `is_empty`.
- `petrol_survivor.event_bus`: `EventBus`, which queues events on `emit` and
  hands them to the subscribers of their exact type on `flush`. Events emitted
  by handlers during a flush are delivered in the same flush. `subscribe`
  returns an id for `unsubscribe`; `clear` drops everything.
- `petrol_survivor.enum_map`: `EnumMap`, holding exactly one value per member
  of an enum (`get_checked`, `keys`, `pairs`), and `all_truthy`.
- `petrol_survivor.name_hash`: `fnv1a` (32-bit FNV-1a, strings as UTF-8) and
  `NameHash`, a name reduced to that hash.
- `petrol_survivor.rng`: `Random`, a seedable source with `rand_int`,
  `rand_float`, `rand_weighted`, `rand_chance`, `rand_vec3`,
  `rand_vec3_circle` and `set_seed`.
- `petrol_survivor.not_initialized`: `NotInitialized` and
  `SettableNotInitialized`, holders that raise `NotInitializedError` when read
  before they hold a usable value.
- `petrol_survivor.stats`: `StatType` and `StatManager`. Defaults are 1.0 for
  MIGHT, AREA, COOLDOWN, SPEED and MAGNET; 0.0 for AMOUNT and HEALTH_REGEN;
  0.05 for CRIT_CHANCE and 2.0 for CRIT_MULTIPLIER.
- `petrol_survivor.upgrade`: `Upgrade`, `ItemOffer`, `item_pool()` (Heart,
  Golden Heart, Running Shoe) and `generate_upgrades(game, count,
  weapon_factories, rng)`, which offers new weapons while the player has free
  slots, the next level of each equipped weapon below its maximum, and every
  stat item, and picks up to `count` distinct ones at random. The game object
  needs a `player` (or None) and a `stats` `StatManager`; weapons come from the
  factories you pass in.
- `petrol_survivor.progression`: `GameState` and `Progression`, which track
  state, score, experience and level (10 exp for the first level, each
  requirement half again the last) and run the level-up choice
  (`select_prev_option`, `select_next_option`, `select_option`,
  `confirm_selection`, `skip_level_up`).
- `petrol_survivor.collision`: `resolve_dynamic_overlap`, which returns the
  offsets that push two overlapping hitboxes apart along the x or z axis, and
  `closest_enemies`, which orders enemies by distance to their hitboxes.

## Install

```
pip install .
```

For the tests:

```
pip install ".[test]"
pytest
```

## Examples

```python
from dataclasses import dataclass
from petrol_survivor.event_bus import EventBus

@dataclass
class Despawn:
    name: str

bus = EventBus()
seen = []
bus.subscribe(Despawn, lambda evt: seen.append(evt.name))
bus.emit(Despawn("crate"))
bus.flush()
assert seen == ["crate"]
```

```python
from petrol_survivor.aabb import AABB, Vec3

a = AABB(Vec3(0, 0, 0), Vec3(1, 1, 1))
b = AABB(Vec3(0.5, 0.5, 0.5), Vec3(2, 2, 2))
assert a.intersects(b)
assert a.closest_point(Vec3(5, 0.5, -1)) == Vec3(1, 0.5, 0)
```

```python
from petrol_survivor.progression import GameState, Progression

run = Progression()
run.reset()          # start menu
run.start_game()     # playing
run.add_exp(12)      # reaches level 2, opens the level-up choice
assert run.state is GameState.LEVEL_UP
assert (run.current_level, run.current_exp, run.exp_to_next_level) == (2, 2, 15)
run.skip_level_up()
assert run.state is GameState.PLAYING
```

## What it does not do

This package has no window, renderer, input handling or command to run. It
does not generate terrain or keep track of map chunks, it defines no weapons,
enemies or spawn schedule of its own, and it has no game loop: a program that
uses it supplies those and calls into these modules.