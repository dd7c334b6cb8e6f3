"""
Two-player console front end for the Othello engine.
"""
import argparse
from typing import Callable, List, Optional

from .config import Config, load_config
from .game import GameState, MoveRejected
from .logger import setup_logger

HELP_TEXT = ("Enter a move as 'row col' (0-7), "
             "'reset' to start over, 'help' for this text, 'quit' to exit.")


class ConsoleGame:
    """Reads commands, drives a GameState and prints what a player needs to see."""

    def __init__(self, config: Config,
                 output: Callable[[str], None] = print):
        self.config = config
        self.output = output
        self.state = GameState()

    def render(self) -> str:
        display = self.config.display
        hints = None
        if display.show_hints and not self.state.game_over:
            hints = self.state.current_player
        lines = [self.state.board.render(display.symbols(), hints, display.hint_symbol)]
        black, white = self.state.get_score()
        lines.append(f"Black: {black} - White: {white}")
        if self.state.game_over:
            lines.append(f"Game over! {self.state.result_message()}")
        else:
            lines.append(f"{self.state.current_player.display_name} to move")
        return "\n".join(lines)

    def handle(self, line: str) -> bool:
        """
        Process one line of input.

        Returns:
            False when the user asked to quit, True otherwise
        """
        command = line.strip().lower()
        if not command:
            return True
        if command in ('quit', 'q', 'exit'):
            return False
        if command == 'help':
            self.output(HELP_TEXT)
            return True
        if command == 'reset':
            self.state.reset()
            self.output(self.render())
            return True

        parts = command.replace(',', ' ').split()
        try:
            if len(parts) != 2 or not all(p.isascii() for p in parts):
                raise ValueError(command)
            row, col = int(parts[0]), int(parts[1])
        except ValueError:
            self.output(f"Unrecognised input: {line.strip()!r}. {HELP_TEXT}")
            return True

        try:
            notice = self.state.play(row, col)
        except MoveRejected as e:
            self.output(f"Rejected: {e}")
            return True

        self.output(self.render())
        if notice is not None:
            self.output(notice.message)
            self.state.acknowledge_pass()
        return True

    def run(self, read: Callable[[str], str] = input) -> GameState:
        """Loop until quit or end of input; returns the final state."""
        self.output(HELP_TEXT)
        self.output(self.render())
        while True:
            try:
                line = read("> ")
            except EOFError:
                break
            if not self.handle(line):
                break
        return self.state


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description='Play Othello in the terminal')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--no-hints', action='store_true',
                        help='Do not mark valid moves on the board')
    args = parser.parse_args(argv)

    config = load_config(args.config)
    if args.no_hints:
        config.display.show_hints = False

    log = setup_logger(config)
    try:
        ConsoleGame(config).run()
    finally:
        log.close()
    return 0
