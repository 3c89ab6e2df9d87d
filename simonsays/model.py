"""Core game logic: the growing sequence, player input and pacing."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import Any, Callable, List, Optional, Protocol

Scheduler = Callable[[int, Callable[[], None]], Any]
"""Runs a callback once after a delay given in milliseconds."""

INITIAL_SPEED_MS = 1000
MIN_SPEED_MS = 300
SPEED_UP = 0.90
ROUND_PAUSE_MS = 1000
FIRST_MOVE_DELAY_MS = 50
TURN_HANDOVER_MS = 100


class Button(IntEnum):
    """The two coloured buttons of the game."""

    RED = 0
    BLUE = 1


class _Chooser(Protocol):
    def randrange(self, stop: int) -> int: ...


class Signal:
    """A minimal observer list: slots are called in connection order."""

    def __init__(self) -> None:
        self._slots: List[Callable[..., Any]] = []

    def connect(self, slot: Callable[..., Any]) -> None:
        """Register a callable to receive every emission."""
        self._slots.append(slot)

    def emit(self, *args: Any) -> None:
        """Call every connected slot with the given arguments."""
        for slot in list(self._slots):
            slot(*args)


class Model:
    """Holds the move sequence, checks player input and drives the rounds.

    Signals:
        player_turn(is_turn): whether the player may press buttons.
        play_move(button_id, speed_factor): a move of the sequence to show.
        progress_updated(percent): how much of the sequence has been repeated.
        game_over(): the player pressed a wrong button.
    """

    def __init__(self, scheduler: Scheduler, rng: Optional[_Chooser] = None) -> None:
        self._schedule = scheduler
        self._rng = rng if rng is not None else random.Random()
        self.player_index = 0
        self.is_game_over = False
        self.sequence: List[int] = []
        self.speed_factor = INITIAL_SPEED_MS

        self.player_turn = Signal()
        self.play_move = Signal()
        self.progress_updated = Signal()
        self.game_over = Signal()

    def start_game(self) -> None:
        """Begin the first round."""
        self._game_loop()

    def handle_player_turn(self, button_id: int) -> None:
        """Check a pressed button against the expected move of the sequence."""
        if not self.sequence:
            raise RuntimeError("the game has not started")

        if self.sequence[self.player_index] == button_id:
            self.player_index += 1
            self.progress_updated.emit(int(self.player_index / len(self.sequence) * 100))

            if self.player_index == len(self.sequence):
                self.player_index = 0
                self.player_turn.emit(False)
                self.speed_factor = max(MIN_SPEED_MS, int(self.speed_factor * SPEED_UP))
                self._schedule(ROUND_PAUSE_MS, self._game_loop)
        else:
            self.is_game_over = True
            self.game_over.emit()

    def _game_loop(self) -> None:
        if self.is_game_over:
            return

        self.player_turn.emit(False)
        self._generate_next_move()
        self.progress_updated.emit(0)
        self._play_sequence()
        self._schedule(
            len(self.sequence) * self.speed_factor + TURN_HANDOVER_MS,
            lambda: self.player_turn.emit(True),
        )

    def _generate_next_move(self) -> None:
        self.sequence.append(Button(self._rng.randrange(2)))

    def _play_sequence(self) -> None:
        for index, move in enumerate(self.sequence):
            self._schedule(
                index * self.speed_factor + FIRST_MOVE_DELAY_MS,
                lambda move=move: self.play_move.emit(move, self.speed_factor),
            )