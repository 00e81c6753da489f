"""
SensorTag TicTacToe UI
A graphical interface for the game using Tkinter.

Shows:
- The board, with the cursor and the winning line highlighted
- Game status and whose turn it is
- Score for both players and draws
- Player mode selection for the next game

The keyboard stands in for the SensorTag: Down and Right are its two
buttons, Space shakes it. Key presses go through the same motion detector
as real sensor data: a fake accelerometer stream is fed at the sensor
period, and Space adds a spike to the next sample.
"""

import threading
import tkinter as tk
from tkinter import ttk
from typing import Dict, Tuple

from controller.game_controller import GameController
from logic.ai_player import PLAYER_MODES, create_player_mode
from logic.pieces import BOARD_SIZE, Piece
from motion.buttons import Button

# Resting SensorTag: gravity only (g)
REST_SAMPLE = (0.0, 0.0, 1.0)
# What a Space press adds to the next sample (g)
SHAKE_SPIKE = (1.5, 1.5, 0.0)

# Redraw check interval (milliseconds)
UPDATE_MS = 33
# A key release followed by a press within this time is autorepeat (milliseconds)
RELEASE_DELAY_MS = 40

BG = '#1a1a2e'
CELL_BG = '#16213e'
CURSOR_BG = '#334155'
WIN_BG = '#065f46'


class KeyboardSensor:
    """
    The keyboard playing the part of the SensorTag.

    Holding a key under X11 autorepeat produces release/press pairs. A
    release is only passed on after RELEASE_DELAY_MS without a new press,
    so a held key is one button press.

    Args:
        controller: Controller receiving the button levels.
        root: Anything with Tk's after() / after_cancel().
    """

    def __init__(self, controller: GameController, root):
        self.controller = controller
        self.root = root
        self.down: Dict[Button, bool] = {Button.LEFT: False, Button.RIGHT: False}
        self.pending_shake = False
        self._release_jobs: Dict[Button, str] = {}

    def press(self, button: Button):
        job = self._release_jobs.pop(button, None)
        if job is not None:
            # Autorepeat: the key never went up
            self.root.after_cancel(job)
            return
        self.down[button] = True
        self._feed_buttons()

    def release(self, button: Button):
        if button in self._release_jobs:
            return
        self._release_jobs[button] = self.root.after(
            RELEASE_DELAY_MS, lambda: self._released(button)
        )

    def _released(self, button: Button):
        self._release_jobs.pop(button, None)
        self.down[button] = False
        self._feed_buttons()

    def _feed_buttons(self):
        self.controller.feed_buttons(self.down[Button.LEFT], self.down[Button.RIGHT])

    def shake(self):
        self.pending_shake = True

    def next_sample(self) -> Tuple[float, float, float]:
        """The next fake accelerometer reading: gravity, plus a spike after shake()."""
        x, y, z = REST_SAMPLE
        if self.pending_shake:
            self.pending_shake = False
            dx, dy, dz = SHAKE_SPIKE
            x, y, z = x + dx, y + dy, z + dz
        return x, y, z


class TicTacToeUI:
    """
    Main UI class for SensorTag TicTacToe.
    """

    def __init__(self, controller: GameController):
        """Initialize the UI."""
        self.controller = controller
        self.period_ms = controller.config.ACCELEROMETER_PERIOD_MS
        self.is_running = False
        # Set from any thread, cleared by the UI thread
        self._dirty = threading.Event()

        self._create_ui()
        self.sensor = KeyboardSensor(controller, self.root)
        self.controller.add_listener(self._on_controller_change)

    def _create_ui(self):
        """Create the Tkinter UI."""
        self.root = tk.Tk()
        self.root.title("SensorTag TicTacToe")
        self.root.configure(bg=BG)
        self.root.minsize(420, 560)

        main_frame = ttk.Frame(self.root)
        main_frame.pack(fill=tk.BOTH, expand=True, padx=10, pady=10)

        # Configure style
        style = ttk.Style()
        style.theme_use('clam')
        style.configure('TFrame', background=BG)
        style.configure('TLabel', background=BG, foreground='white', font=('Segoe UI', 11))
        style.configure('Title.TLabel', font=('Segoe UI', 16, 'bold'), foreground='#00d4ff')
        style.configure('Status.TLabel', font=('Segoe UI', 12), foreground='#ffd700')
        style.configure('TButton', font=('Segoe UI', 10, 'bold'))

        ttk.Label(main_frame, text="Game Board", style='Title.TLabel').pack(pady=(0, 10))

        board_frame = ttk.Frame(main_frame)
        board_frame.pack(pady=10)

        self.board_cells = []
        for row in range(BOARD_SIZE):
            row_cells = []
            for col in range(BOARD_SIZE):
                cell = tk.Label(
                    board_frame,
                    text="",
                    font=('Segoe UI', 24, 'bold'),
                    width=4,
                    height=2,
                    bg=CELL_BG,
                    fg='white',
                    relief='ridge',
                    borderwidth=2
                )
                cell.grid(row=row, column=col, padx=2, pady=2)
                # Clicking a cell moves the cursor there
                cell.bind("<Button-1>", lambda _e, r=row, c=col: self.controller.set_cursor(r, c))
                row_cells.append(cell)
            self.board_cells.append(row_cells)

        # Game status section
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        self.status_label = ttk.Label(main_frame, text="", style='Status.TLabel')
        self.status_label.pack(pady=5)

        self.score_label = ttk.Label(main_frame, text="")
        self.score_label.pack()

        # Next game settings
        ttk.Separator(main_frame, orient='horizontal').pack(fill=tk.X, pady=10)
        settings = ttk.Frame(main_frame)
        settings.pack(pady=5)

        ttk.Label(settings, text="Player 1").grid(row=0, column=0, padx=5)
        self.player_one_var = tk.StringVar(value=self.controller.player_one.name)
        ttk.Combobox(settings, textvariable=self.player_one_var, values=list(PLAYER_MODES),
                     state='readonly', width=8).grid(row=0, column=1)

        self.first_var = tk.StringVar(value=self.controller.player_one_piece.value)
        ttk.Combobox(settings, textvariable=self.first_var, values=["X", "O"],
                     state='readonly', width=3).grid(row=0, column=2, padx=5)

        ttk.Label(settings, text="Player 2").grid(row=1, column=0, padx=5)
        self.player_two_var = tk.StringVar(value=self.controller.player_two.name)
        ttk.Combobox(settings, textvariable=self.player_two_var, values=list(PLAYER_MODES),
                     state='readonly', width=8).grid(row=1, column=1)

        # Control buttons
        control_frame = ttk.Frame(main_frame)
        control_frame.pack(pady=10)

        tk.Button(
            control_frame,
            text="New Game (N)",
            font=('Segoe UI', 11, 'bold'),
            bg='#10b981',
            fg='white',
            width=12,
            command=self._new_game
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            control_frame,
            text="Reset Score (R)",
            font=('Segoe UI', 11, 'bold'),
            bg='#6366f1',
            fg='white',
            width=12,
            command=self.controller.reset_score
        ).pack(side=tk.LEFT, padx=5)

        tk.Button(
            main_frame,
            text="Quit",
            font=('Segoe UI', 10),
            bg='#ef4444',
            fg='white',
            width=26,
            command=self._quit
        ).pack(pady=10)

        # Keyboard stands in for the SensorTag
        self.root.bind("<KeyPress-Down>", lambda _e: self.sensor.press(Button.LEFT))
        self.root.bind("<KeyRelease-Down>", lambda _e: self.sensor.release(Button.LEFT))
        self.root.bind("<KeyPress-Right>", lambda _e: self.sensor.press(Button.RIGHT))
        self.root.bind("<KeyRelease-Right>", lambda _e: self.sensor.release(Button.RIGHT))
        self.root.bind("<space>", lambda _e: self.sensor.shake())
        self.root.bind("<KeyPress-n>", lambda _e: self._new_game())
        self.root.bind("<KeyPress-r>", lambda _e: self.controller.reset_score())

        self.root.protocol("WM_DELETE_WINDOW", self._quit)

    def _sensor_loop(self):
        """Feed one fake accelerometer sample per sensor period."""
        if not self.is_running:
            return

        self.controller.feed_sample(self.period_ms, *self.sensor.next_sample())

        self.root.after(self.period_ms, self._sensor_loop)

    def _new_game(self):
        self.controller.new_game(
            player_one_piece=Piece.parse(self.first_var.get()),
            player_one=create_player_mode(self.player_one_var.get()),
            player_two=create_player_mode(self.player_two_var.get()),
        )

    def _on_controller_change(self, _controller: GameController):
        # May run on a timer thread holding the controller lock: no Tk calls here
        self._dirty.set()

    def _update_loop(self):
        """Redraw when the controller has changed (runs on UI thread)."""
        if not self.is_running:
            return

        if self._dirty.is_set():
            self._dirty.clear()
            self._refresh()

        self.root.after(UPDATE_MS, self._update_loop)

    def _refresh(self):
        """Update the board, status and score."""
        with self.controller.lock:
            game = self.controller.game
            cursor = self.controller.cursor
            winning = set(game.winning_line() or [])

            for row in range(BOARD_SIZE):
                for col in range(BOARD_SIZE):
                    piece = game.get(row, col)
                    if (row, col) in winning:
                        bg = WIN_BG
                    elif (row, col) == cursor and not game.is_finished:
                        bg = CURSOR_BG
                    else:
                        bg = CELL_BG
                    fg = '#10b981' if piece == Piece.X else '#ff6b6b'
                    self.board_cells[row][col].configure(
                        text="" if piece == Piece.EMPTY else piece.value, bg=bg, fg=fg
                    )

            self.status_label.configure(text=self.controller.status_message())
            self.score_label.configure(text=self.controller.scoreboard.format())

    def _quit(self):
        """Quit the application."""
        self.is_running = False
        self.controller.close()
        self.root.quit()
        self.root.destroy()

    def run(self):
        """Run the UI main loop."""
        self.is_running = True
        self._refresh()
        self.root.after(self.period_ms, self._sensor_loop)
        self.root.after(UPDATE_MS, self._update_loop)
        self.root.mainloop()
