"""
Command line entrypoint.

  senku                 numbered menu (play / random search / backtracking / quit)
  senku play            play a game by typing moves like C4U
  senku random          best of many random games
  senku solve           backtracking search
"""

import argparse
import logging
import sys
from typing import Callable, Optional

from senku.api.models import (
    MoveRequest,
    NewGameRequest,
    RandomSearchRequest,
    SolveRequest,
    SolveResponse,
)
from senku.core.config import SenkuConfig
from senku.core.exceptions import SenkuError
from senku.services.solitaire_service import SolitaireService
from senku.solitaire.game import is_quit_command
from senku.solitaire.playout import DEFAULT_ROUNDS
from senku.solitaire.search import DEFAULT_PROGRESS_INTERVAL
from senku.solitaire.templates import DEFAULT_TEMPLATE_NAME, TEMPLATES

InputFn = Callable[[str], str]

UNDO_COMMAND = "undo"

MENU = """1. Play a game
2. Solve the game using a randomized search
3. Solve the game using a backtracking search
4. Quit the program"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="senku", description="Peg solitaire player and solver"
    )
    parser.add_argument(
        "command",
        nargs="?",
        choices=["menu", "play", "random", "solve"],
        default="menu",
        help="What to do (default: show the menu)",
    )
    parser.add_argument(
        "--board",
        choices=list(TEMPLATES),
        default=DEFAULT_TEMPLATE_NAME,
        help="Board shape",
    )
    parser.add_argument(
        "--target",
        type=int,
        default=None,
        help="Number of jumps needed to solve the board (default: all pegs but one)",
    )
    parser.add_argument(
        "--rounds", type=int, default=DEFAULT_ROUNDS, help="Rounds of random play"
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="RNG seed for the random search"
    )
    parser.add_argument(
        "--progress-interval",
        type=int,
        default=DEFAULT_PROGRESS_INTERVAL,
        help="Report backtracking progress every N positions (0: never)",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show progress reports"
    )
    return parser


def config_from_args(args: argparse.Namespace) -> SenkuConfig:
    return SenkuConfig(
        board=args.board,
        target_score=args.target,
        progress_interval=args.progress_interval,
        rounds=args.rounds,
        seed=args.seed,
    )


def print_solution(response: SolveResponse) -> None:
    if response.solved:
        print(
            f"Found a solution with {response.score} moves, here they are: {response.moves}"
        )
    else:
        print(
            f"No solution reaching {response.target_score} moves. Best: {response.score} moves: {response.moves}"
        )
    print(f"The final state of the board: \n{response.final_board}")


def play(
    service: SolitaireService, config: SenkuConfig, input_fn: InputFn = input
) -> None:
    """
    Interactive game loop.
    ---

    Wrong notation / illegal moves are reported and the player can simply try again.
    Once stuck, the final score is shown but the player can still undo, or quit.
    """
    state = service.new_game(NewGameRequest(template=config.template))
    while True:
        print(state.board)
        if not state.legal_moves:
            print(f"No moves left! Final score: {state.score}")
        else:
            print("Valid moves:", ", ".join(state.legal_moves))

        try:
            user_input = input_fn("Enter your move, undo, or q to quit: ")
        except EOFError:
            user_input = "q"
        if is_quit_command(user_input):
            print("Thanks for playing!")
            break

        try:
            if user_input.strip() == UNDO_COMMAND:
                state = service.undo_move()
            else:
                state = service.make_move(MoveRequest(move=user_input))
        except SenkuError as error:
            print(error)


def run_random_search(service: SolitaireService, config: SenkuConfig) -> SolveResponse:
    request = RandomSearchRequest(
        template=config.template,
        target_score=config.resolved_target_score,
        rounds=config.rounds,
        seed=config.seed,
    )
    response = service.random_search(request)
    print_solution(response)
    return response


def run_backtracking(service: SolitaireService, config: SenkuConfig) -> SolveResponse:
    request = SolveRequest(
        template=config.template,
        target_score=config.resolved_target_score,
        progress_interval=config.progress_interval,
    )
    response = service.solve(request)
    print_solution(response)
    print(f"{response.positions_visited} positions searched.")
    return response


def menu(
    service: SolitaireService, config: SenkuConfig, input_fn: InputFn = input
) -> None:
    print("Welcome to senku! What do you want to do? Enter 1-4: ")
    while True:
        print(MENU)
        try:
            choice = input_fn("> ").strip()[:1]
        except EOFError:
            break
        if choice == "1":
            play(service, config, input_fn)
        elif choice == "2":
            run_random_search(service, config)
        elif choice == "3":
            run_backtracking(service, config)
        elif choice == "4":
            break
        else:
            print("Incorrect digit.")


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = config_from_args(args)
    except SenkuError as error:
        print(f"error: {error}", file=sys.stderr)
        return 2

    service = SolitaireService()
    if args.command == "play":
        play(service, config)
    elif args.command == "random":
        run_random_search(service, config)
    elif args.command == "solve":
        run_backtracking(service, config)
    else:
        menu(service, config)
    return 0


if __name__ == "__main__":
    sys.exit(main())
