"""
Main entry point for SensorTag TicTacToe.

This script ties together:
- Logic (game state, rules, computer players)
- Motion (shake and button detection)
- Controller (turns, cursor, score)

Run it without arguments to play in a window, with the keyboard standing
in for the SensorTag. Pass --replay to feed a recorded sensor trace
through the game headlessly.
"""

import argparse
import logging
from typing import List, Optional

from controller.config import ControllerConfig
from controller.game_controller import GameController
from controller.samples import SensorSample, load_trace
from controller.scheduler import ImmediateScheduler
from logic.ai_player import PLAYER_MODES, create_player_mode
from logic.pieces import Piece

logger = logging.getLogger(__name__)


def build_controller(args: argparse.Namespace, scheduler=None) -> GameController:
    """
    Create a controller and start a game with the command-line settings.

    Args:
        args: Parsed command-line arguments.
        scheduler: Scheduler for computer moves (real timers if None).
    """
    controller = GameController(scheduler=scheduler, config=ControllerConfig())
    if args.delay_ms is not None:
        controller.computer_delay_ms = args.delay_ms

    controller.new_game(
        player_one_piece=Piece.parse(args.first),
        player_one=create_player_mode(args.player1),
        player_two=create_player_mode(args.player2),
    )
    return controller


def replay(controller: GameController, samples: List[SensorSample]) -> GameController:
    """
    Feed a recorded trace through the controller, printing each move.

    Args:
        controller: Controller to drive. Use an ImmediateScheduler so that
            computer moves happen between samples.
        samples: The recorded sensor updates.

    Returns:
        The controller, for inspecting the final state.
    """
    printed = {"game": None, "moves": 0}

    def show(ctrl: GameController):
        if ctrl.game is not printed["game"]:
            printed["game"] = ctrl.game
            printed["moves"] = 0
        if len(ctrl.game.moves) != printed["moves"]:
            printed["moves"] = len(ctrl.game.moves)
            ctrl.game.print_board()

    controller.add_listener(show)

    for sample in samples:
        controller.feed_buttons(sample.left, sample.right)
        controller.feed_sample(sample.period_ms, sample.x, sample.y, sample.z)

    print("\n" + "=" * 60)
    print(f"   {controller.status_message()}")
    print(f"   {controller.scoreboard.format()}")
    print("=" * 60)
    return controller


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="SensorTag TicTacToe")
    parser.add_argument(
        "--replay",
        metavar="TRACE.csv",
        help="Replay a recorded sensor trace (period_ms,x,y,z[,left,right]) without a UI"
    )
    parser.add_argument(
        "--player1",
        choices=list(PLAYER_MODES),
        default=ControllerConfig.DEFAULT_PLAYER_ONE,
        help="Player 1 mode"
    )
    parser.add_argument(
        "--player2",
        choices=list(PLAYER_MODES),
        default=ControllerConfig.DEFAULT_PLAYER_TWO,
        help="Player 2 mode"
    )
    parser.add_argument(
        "--first",
        choices=["x", "o"],
        type=str.lower,
        default=ControllerConfig.PLAYER_ONE_PIECE.lower(),
        help="Piece played by player 1 (X always moves first)"
    )
    parser.add_argument(
        "--delay-ms",
        type=int,
        default=None,
        help=f"Computer thinking time (default: {ControllerConfig.COMPUTER_DELAY_MS})"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging"
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.replay:
        print("\n" + "=" * 60)
        print(f"   Replaying {args.replay}")
        print("=" * 60)
        samples = load_trace(args.replay)
        args.delay_ms = 0
        controller = build_controller(args, scheduler=ImmediateScheduler())
        replay(controller, samples)
        return

    from ui import TicTacToeUI
    print("\n" + "=" * 60)
    print("   SensorTag TicTacToe")
    print("   Down/Right = SensorTag buttons, Space = shake")
    print("=" * 60 + "\n")
    ui = TicTacToeUI(build_controller(args))
    try:
        ui.run()
    except KeyboardInterrupt:
        print("\n\nGame interrupted by user.")
    finally:
        print("Goodbye!")


if __name__ == "__main__":
    main()
