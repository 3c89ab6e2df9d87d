"""Tk user interface for the game and its entry point."""

from __future__ import annotations

import argparse
import tkinter as tk
from tkinter import ttk
from typing import Optional, Sequence

from simonsays.model import Button, Model, Signal

MIN_FLASH_MS = 100
FLASH_RATIO = 0.6

_FLASH_COLOURS = {Button.RED: "red", Button.BLUE: "blue"}


def flash_duration(speed_factor: int) -> int:
    """Time a button stays lit: 60% of the move interval, at least 100 ms."""
    return max(MIN_FLASH_MS, int(speed_factor * FLASH_RATIO))


class MainWindow:
    """Buttons, progress bar and labels wired to a Model."""

    def __init__(self, root: tk.Misc, model: Model) -> None:
        self._root = root
        self.button_pressed = Signal()

        frame = ttk.Frame(root, padding=20)
        frame.grid(sticky="nsew")

        self._start_label = ttk.Label(frame, text="Welcome to Simon Says!")
        self._start_label.grid(row=0, column=0, columnspan=2, pady=10)
        self._start_button = tk.Button(frame, text="Start")
        self._start_button.grid(row=1, column=0, columnspan=2, pady=10)

        self._red_button = tk.Button(frame, text="Red", width=12, height=5)
        self._red_button.grid(row=2, column=0, padx=10, pady=10)
        self._blue_button = tk.Button(frame, text="Blue", width=12, height=5)
        self._blue_button.grid(row=2, column=1, padx=10, pady=10)
        self._default_colour = self._red_button.cget("background")

        self._progress = ttk.Progressbar(frame, maximum=100, length=300)
        self._progress.grid(row=3, column=0, columnspan=2, pady=10)

        self._game_over_label = ttk.Label(frame, text="You Lose!")
        self._game_over_label.grid(row=4, column=0, columnspan=2, pady=10)

        for widget in (self._red_button, self._blue_button, self._progress, self._game_over_label):
            widget.grid_remove()

        def on_start() -> None:
            model.start_game()
            self.show_game_buttons()
            self.hide_game_buttons()

        self._start_button.configure(command=on_start)
        self._red_button.configure(command=self.on_red_button_clicked)
        self._blue_button.configure(command=self.on_blue_button_clicked)

        model.player_turn.connect(self.update_game_button_state)
        model.play_move.connect(self.flash_button)
        self.button_pressed.connect(model.handle_player_turn)
        model.progress_updated.connect(self.set_progress_bar)
        model.game_over.connect(self.on_game_over)

    def show_game_buttons(self) -> None:
        """Reveal the coloured buttons and the progress bar."""
        self._red_button.grid()
        self._blue_button.grid()
        self._progress.grid()

    def hide_game_buttons(self) -> None:
        """Hide the start button and the welcome label."""
        self._start_button.grid_remove()
        self._start_label.grid_remove()

    def update_game_button_state(self, is_turn: bool) -> None:
        """Enable the coloured buttons only during the player's turn."""
        state = tk.NORMAL if is_turn else tk.DISABLED
        self._red_button.configure(state=state)
        self._blue_button.configure(state=state)

    def flash_button(self, button_id: int, speed_factor: int) -> None:
        """Light up a button briefly with an audible cue."""
        button_id = Button(button_id)
        self._root.bell()
        button = self._red_button if button_id is Button.RED else self._blue_button
        button.configure(background=_FLASH_COLOURS[button_id])
        self._root.after(
            flash_duration(speed_factor),
            lambda: button.configure(background=self._default_colour),
        )

    def on_red_button_clicked(self) -> None:
        self.button_pressed.emit(Button.RED)

    def on_blue_button_clicked(self) -> None:
        self.button_pressed.emit(Button.BLUE)

    def set_progress_bar(self, progress: int) -> None:
        """Show how much of the sequence the player has repeated."""
        self._progress.configure(value=progress)

    def on_game_over(self) -> None:
        """Remove the game controls and show the losing message."""
        self._red_button.grid_remove()
        self._blue_button.grid_remove()
        self._progress.grid_remove()
        self._game_over_label.grid()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Open the game window and run until it is closed."""
    parser = argparse.ArgumentParser(prog="simonsays", description="Play Simon Says.")
    parser.parse_args(argv)

    root = tk.Tk()
    root.title("Simon Says")
    style = ttk.Style(root)
    if "clam" in style.theme_names():
        style.theme_use("clam")
    model = Model(lambda delay, callback: root.after(delay, callback))
    MainWindow(root, model)
    root.mainloop()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())