#!/usr/bin/env python3
"""
Minimal terminal front end for the dominoes engine.

Interactive by default: type a hand index to play that tile or `d` to draw.
With --auto a random agent plays the player side so whole games can be
simulated from the command line.
"""

import argparse
import logging
from dataclasses import replace
from typing import Callable, Optional

from dominoes.agents import RandomAgent
from dominoes.game.actions import Action, ActionType
from dominoes.game.config import GameConfig
from dominoes.game.game import GameState, create_game
from dominoes.game.outcomes import DrawResult, Outcome, PlayResult
from dominoes.game.rules import apply_action, get_legal_actions
from dominoes.game.tiles import Side
from dominoes.settings import configure_logging, get_game_settings
from game_logger import GameLogger

logger = logging.getLogger(__name__)

MESSAGES = {
    Outcome.ILLEGAL_MOVE: "Invalid move! Try another tile.",
    Outcome.BAD_INDEX: "No tile at that position.",
    Outcome.HAS_LEGAL_MOVE: "You have a tile you can play.",
    Outcome.DREW: "You drew a tile.",
    Outcome.REDISTRIBUTED: "Nobody could move: tiles were reshuffled and dealt again.",
    Outcome.DEADLOCK_UNRESOLVED: "You cannot play and the stock is empty.",
    Outcome.OPPONENT_NO_MOVE: "Computer could not move.",
    Outcome.GAME_OVER: "The game is over.",
}


def print_game_state(game: GameState) -> None:
    """Print the board and the player's hand."""
    print("\n" + "=" * 60)
    print(f"TURN {game.turn_number}  |  stock: {game.stock_size}  |  "
          f"computer holds {len(game.hand(Side.OPPONENT))}")
    print("=" * 60)
    print("Board: " + ("".join(str(t) for t in game.chain) or "(empty)"))

    cells = []
    for i, tile in enumerate(game.hand(Side.PLAYER)):
        mark = "*" if game.can_play(tile) else " "
        cells.append(f"{i}:{tile}{mark}")
    print("Your hand: " + "  ".join(cells))


def describe(result) -> str:
    """Turn an engine result into a line of text."""
    if isinstance(result, PlayResult) and result.ok:
        line = f"You played {result.tile} on the {result.end}."
        opp = result.opponent
        if opp is not None and opp.played:
            drew = f" after drawing {opp.draws}" if opp.draws else ""
            line += f" Computer played {opp.tile}{drew}."
        elif opp is not None:
            line += " " + MESSAGES[opp.outcome]
        return line
    if isinstance(result, DrawResult) and result.tile is not None:
        return f"You drew {result.tile}."
    return MESSAGES.get(result.outcome, result.outcome.value)


def read_action(prompt: Callable[[str], str] = input) -> Optional[Action]:
    """Ask for a hand index, `d` to draw or `q` to quit."""
    while True:
        raw = prompt("Play index, [d]raw or [q]uit: ").strip().lower()
        if raw in ("q", "quit"):
            return None
        if raw in ("d", "draw"):
            return Action(ActionType.DRAW)
        if raw.isdigit():
            return Action(ActionType.PLAY_TILE, hand_index=int(raw))
        print("Enter a number, d or q.")


def play_game(
    game: GameState,
    *,
    auto: bool = False,
    agent_seed: Optional[int] = None,
    max_turns: int = 500,
    verbose: bool = True,
    log: Optional[GameLogger] = None,
    prompt: Callable[[str], str] = input,
) -> GameState:
    """
    Run a game until it ends, stalls, or the user quits.

    Args:
        game: Game to drive
        auto: Let a RandomAgent play the player side
        agent_seed: Seed for the random agent
        max_turns: Stop simulated games after this many plays
        verbose: Print the board between moves
        log: Optional JSONL logger
        prompt: Input function for interactive play
    """
    agent = RandomAgent(Side.PLAYER, "Player", seed=agent_seed) if auto else None
    stalled = 0

    # Safety limit: draws and redistributions do not advance turn_number
    iteration_count = 0
    max_iterations = max_turns * 10

    while not game.game_over and game.turn_number < max_turns and iteration_count < max_iterations:
        iteration_count += 1
        if log is not None:
            log.flush_engine_events(game)
        if verbose:
            print_game_state(game)

        if agent is not None:
            action = agent.choose_action(game, get_legal_actions(game, Side.PLAYER))
        else:
            action = read_action(prompt)
        if action is None:
            break

        result = apply_action(game, action, Side.PLAYER)
        if verbose:
            print(describe(result))

        # A simulated player stuck on an empty stock cannot make progress
        if result.outcome == Outcome.DEADLOCK_UNRESOLVED:
            stalled += 1
            if agent is not None or stalled >= 3:
                logger.info("Player is blocked with an empty stock; stopping")
                break
        else:
            stalled = 0

    if iteration_count >= max_iterations:
        logger.warning("Safety limit hit after %d iterations", iteration_count)

    if log is not None:
        log.flush_engine_events(game)
        log.log_snapshot(game)

    if verbose:
        print_game_summary(game)
    return game


def print_game_summary(game: GameState) -> None:
    """Print final game summary."""
    print("\n" + "=" * 60)
    print("GAME OVER" if game.game_over else "GAME STOPPED")
    print("=" * 60)
    if game.winner is not None:
        print(f"Winner: {game.winner.value}")
    print(f"Tiles left: you {len(game.hand(Side.PLAYER))}, computer {len(game.hand(Side.OPPONENT))}")
    print(f"Total plays: {game.turn_number}")


def main() -> None:
    """Main entry point for CLI."""
    settings = get_game_settings()
    parser = argparse.ArgumentParser(description="Play dominoes against the computer")
    parser.add_argument("--seed", type=int, default=settings.seed, help="Shuffle seed")
    parser.add_argument("--auto", action="store_true", help="Let a random agent play for you")
    parser.add_argument("--agent-seed", type=int, default=None, help="Seed for the --auto agent")
    parser.add_argument(
        "--end-on-empty-hand",
        action="store_true",
        default=settings.end_on_empty_hand,
        help="Finish the game when a hand is emptied",
    )
    parser.add_argument("--max-turns", type=int, default=500, help="Play limit for simulated games")
    parser.add_argument("--quiet", action="store_true", help="Reduce output verbosity")
    parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Path to JSONL event log (default: no log)",
    )
    args = parser.parse_args()

    configure_logging()

    config = replace(
        GameConfig.from_settings(settings),
        seed=args.seed,
        end_on_empty_hand=args.end_on_empty_hand,
    )
    game = create_game(config)
    log = GameLogger(args.log_file) if args.log_file else None

    play_game(
        game,
        auto=args.auto,
        agent_seed=args.agent_seed,
        max_turns=args.max_turns,
        verbose=not args.quiet,
        log=log,
    )


if __name__ == "__main__":
    main()
