"""Run state, score, experience and the level-up choice flow."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Callable, List, Optional, Sequence

from petrol_survivor.upgrade import Upgrade

STARTING_EXP_TO_NEXT_LEVEL = 10
STARTING_LEVEL = 1
EXP_REQUIREMENT_GROWTH = 1.5

OfferSource = Callable[[], Sequence[Upgrade]]


class GameState(Enum):
    LOADING = auto()
    START_MENU = auto()
    PLAYING = auto()
    LEVEL_UP = auto()
    GAME_OVER = auto()


def _no_offers() -> Sequence[Upgrade]:
    return []


class Progression:
    """Tracks the game state, score and levels, and runs level-up choices.

    ``offer_upgrades`` is called whenever a new set of level-up candidates is
    needed and returns the upgrades to choose from.
    """

    def __init__(self, offer_upgrades: Optional[OfferSource] = None) -> None:
        self._offer_upgrades = offer_upgrades if offer_upgrades is not None else _no_offers
        self.state = GameState.LOADING
        self.game_time = 0.0
        self.score = 0
        self.current_exp = 0
        self.exp_to_next_level = STARTING_EXP_TO_NEXT_LEVEL
        self.current_level = STARTING_LEVEL
        self.pending_level_ups = 0
        self.candidates: List[Upgrade] = []
        self.selection = -1

    def reset(self) -> None:
        """Return to the start menu with a fresh score and level."""
        self.game_time = 0.0
        self.current_exp = 0
        self.exp_to_next_level = STARTING_EXP_TO_NEXT_LEVEL
        self.current_level = STARTING_LEVEL
        self.pending_level_ups = 0
        self.score = 0
        self.state = GameState.START_MENU

    def start_game(self) -> None:
        """Begin playing; only has an effect from the start menu."""
        if self.state is GameState.START_MENU:
            self.state = GameState.PLAYING
            self.game_time = 0.0

    def _open_level_up(self) -> None:
        self.state = GameState.LEVEL_UP
        self.candidates = list(self._offer_upgrades())
        self.selection = 0

    def add_exp(self, amount: float) -> None:
        """Collect experience; it also counts towards the score.

        Each level reached raises the next requirement by half. Reaching a
        level opens the level-up choice unless one is already open.
        """
        gained = int(amount)
        self.score += gained
        self.current_exp += gained

        while self.current_exp >= self.exp_to_next_level:
            self.current_exp -= self.exp_to_next_level
            self.exp_to_next_level = int(self.exp_to_next_level * EXP_REQUIREMENT_GROWTH)
            self.current_level += 1
            self.pending_level_ups += 1

        if self.pending_level_ups > 0 and self.state is not GameState.LEVEL_UP:
            self._open_level_up()

    def select_prev_option(self) -> None:
        """Move the selection one candidate back, wrapping around."""
        if not self.candidates:
            return
        if self.selection < 0:
            self.selection = 0
        self.selection = (self.selection - 1) % len(self.candidates)

    def select_next_option(self) -> None:
        """Move the selection one candidate on, wrapping around."""
        if not self.candidates:
            return
        if self.selection < 0:
            self.selection = 0
        self.selection = (self.selection + 1) % len(self.candidates)

    def select_option(self, index: int) -> None:
        """Select candidate ``index``; indices out of range are ignored."""
        if 0 <= index < len(self.candidates):
            self.selection = index

    def _finish_choice(self) -> None:
        self.selection = -1
        self.candidates = []
        if self.pending_level_ups > 0:
            self.pending_level_ups -= 1
        if self.pending_level_ups > 0:
            self._open_level_up()
            return
        self.resume_playing()

    def confirm_selection(self, game: Any) -> None:
        """Apply the selected candidate to ``game`` and move to the next choice."""
        if not self.candidates:
            return
        if self.selection < 0:
            self.selection = 0
        if self.selection < len(self.candidates):
            self.candidates[self.selection].apply(game)
        self._finish_choice()

    def skip_level_up(self) -> None:
        """Discard the current choice without applying anything."""
        self._finish_choice()

    def resume_playing(self) -> None:
        if self.state is GameState.LEVEL_UP:
            self.state = GameState.PLAYING

    def game_over(self) -> None:
        self.state = GameState.GAME_OVER