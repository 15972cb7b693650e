import argparse
import logging
import random
import sys
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from tic_tac_toe.exception import GameAbortedError
from tic_tac_toe.game import Game
from tic_tac_toe.player_ai import ComputerPlayer
from tic_tac_toe.player_local import HumanPlayer
from tic_tac_toe.ui_pygame import PygameUi
from tic_tac_toe.ui_terminal import TerminalUi

if TYPE_CHECKING:
    from tic_tac_toe.player import Player
    from tic_tac_toe.ui import Ui

logger = logging.getLogger(__name__)

DEFAULT_HUMAN_NAME = "Player"
GREETING = "Play the dumb computer!"


def main(argv: Sequence[str] | None = None, ui: "Ui | None" = None) -> int:
    ui_choices: dict[str, type[Ui]] = {"terminal": TerminalUi, "pygame": PygameUi}

    args = _parse_args(ui_choices.keys(), argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    if ui is None:
        ui = ui_choices[args.ui]()
    rng = random.Random(args.seed)

    try:
        if {args.player_x, args.player_o} == {"human", "computer"}:
            ui.show_message(GREETING)
        players = _create_players(args, ui, rng)
        Game(*players, ui=ui).run()
    except GameAbortedError as e:
        logger.info("Game aborted: %s", e)
        print("Game aborted", file=sys.stderr)  # noqa: T201
        return 1
    return 0


def _create_players(args: argparse.Namespace, ui: "Ui", rng: random.Random) -> tuple["Player", "Player"]:
    human_name: str | None = args.name
    humans = 0
    players: list[Player] = []

    for player_type in (args.player_x, args.player_o):
        match player_type:
            case "human":
                if human_name is None:
                    human_name = ui.ask_name() or DEFAULT_HUMAN_NAME
                humans += 1
                name = human_name if humans == 1 else f"{human_name} {humans}"
                players.append(HumanPlayer(name, ui))
            case "computer":
                players.append(ComputerPlayer(rng=rng))
            case _:
                msg = f"Unknown player type: {player_type}. Choose from 'human', 'computer'."
                raise ValueError(msg)

    player_x, player_o = players
    return player_x, player_o


def _parse_args(ui_choices: Iterable[str], argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tic-tac-toe", description="Play tic-tac-toe against the computer.")

    parser.add_argument("--player-x", choices=("human", "computer"), default="human")
    parser.add_argument("--player-o", choices=("human", "computer"), default="computer")
    parser.add_argument("--name", help="name of the human player (asked at start-up if omitted)")

    parser.add_argument("--ui", choices=list(ui_choices), default="terminal")
    parser.add_argument("--seed", type=int, help="seed for the computer player's random moves")
    parser.add_argument("--log-level", choices=("DEBUG", "INFO", "WARNING", "ERROR"), default="WARNING")

    return parser.parse_args(argv)


if __name__ == "__main__":
    sys.exit(main())
