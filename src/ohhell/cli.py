"""
Command-line interface for the Oh-Hell engine.

Usage examples (after ``pip install -e .``):

    python -m ohhell.cli simulate --matches 200 --seed 0 --output results.json
    python -m ohhell.cli play --seed 7 --rounds 5
"""
from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Callable, Optional

from .agents import HeuristicAgent, RandomAgent
from .bidding import forbidden_closing_bid
from .errors import GameError
from .game import GameState, MatchConfig, MAX_ROUND, Phase
from .play import PLAYERS
from .simulate import run_matches, summarize


def _add_simulate_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "simulate",
        help="Play computer-only matches and report score statistics.",
    )
    parser.add_argument(
        "--matches",
        type=int,
        default=100,
        help="Number of matches to play.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Random seed for the whole batch.",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=MAX_ROUND,
        help="Cards per hand in the first round (the match counts down to 1).",
    )
    parser.add_argument(
        "--random-seats",
        type=int,
        default=0,
        help="How many seats (from seat 0) use the random baseline instead of the heuristic.",
    )
    parser.add_argument(
        "--output",
        type=str,
        default=None,
        help="Optional JSON file for the summary.",
    )
    parser.set_defaults(func=_cmd_simulate)


def _cmd_simulate(args: argparse.Namespace) -> None:
    def make_agents(seed: int):
        return [
            RandomAgent(seed=seed + seat) if seat < args.random_seats else HeuristicAgent()
            for seat in range(PLAYERS)
        ]

    scores = run_matches(args.matches, seed=args.seed, start_round=args.rounds, make_agents=make_agents)
    summary = summarize(scores)
    for seat in range(PLAYERS):
        kind = "random" if seat < args.random_seats else "heuristic"
        print(
            f"[seat {seat} {kind}] "
            f"mean={summary['mean'][seat]:.1f} "
            f"std={summary['std'][seat]:.1f} "
            f"wins={int(summary['wins'][seat])}",
            flush=True,
        )

    if args.output:
        out_file = Path(args.output)
        data = {
            "matches": args.matches,
            "seed": args.seed,
            "rounds": args.rounds,
            "random_seats": args.random_seats,
            "summary": summary,
        }
        with out_file.open("w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        print(f"Saved summary to {out_file.resolve()}")


def _add_play_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "play",
        help="Play a match in the terminal against three computer players.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for the shuffles.",
    )
    parser.add_argument(
        "--rounds",
        type=int,
        default=MAX_ROUND,
        help="Cards per hand in the first round.",
    )
    parser.add_argument(
        "--name",
        type=str,
        default="human",
        help="Your name at the table.",
    )
    parser.set_defaults(func=_cmd_play)


def _print_table(state: GameState) -> None:
    for p in state.players:
        print(f"  {p.name:>8}: bid {p.bid}  tricks {p.tricks}  points {p.points}")
    if state.trick.cards:
        board = "  ".join(f"{state.players[seat].name}:{card}" for card, seat in state.trick.cards)
        print(f"  board: {board}")
    if state.trick.trump_broken:
        print("  (trump broken)")


def _cmd_play(args: argparse.Namespace, input_fn: Callable[[str], str] = input) -> None:
    state = GameState(MatchConfig(seed=args.seed, human_name=args.name, start_round=args.rounds))
    human = state.players[state.config.human_seat]
    seen_rounds = 0

    while True:
        for seat, move in state.advance_computers():
            verb = "bids" if isinstance(move, int) else "plays"
            print(f"{state.players[seat].name} {verb} {move}")
        for result in state.history[seen_rounds:]:
            print(f"Round of {result.round} over: points {list(result.points)} totals {list(result.totals)}")
        seen_rounds = len(state.history)
        if state.is_over():
            break

        print(f"\nRound of {state.round}, trick {state.tricks_completed + 1}")
        _print_table(state)
        hand = "  ".join(f"[{i}] {c}" for i, c in enumerate(human.hand))
        print(f"  your hand: {hand}")

        if state.phase == Phase.BIDDING:
            hint = ""
            if state.is_last_bidder():
                forbidden = forbidden_closing_bid(state.round, state.total_bids)
                if forbidden is not None:
                    hint = f" (not {forbidden})"
            prompt = f"Your bid 0..{state.round}{hint}: "
        else:
            prompt = "Card to play: "
        raw = input_fn(prompt).strip()
        if not raw.isdigit():
            print("Please enter a number")
            continue
        value = int(raw)

        try:
            if state.phase == Phase.BIDDING:
                state.submit_bid(human.id, value)
            elif value < len(human.hand):
                state.submit_play(human.id, human.hand[value].id)
            else:
                print("No such card")
        except GameError as exc:
            print(exc.message)

    winner = max(state.players, key=lambda p: p.points)
    print(f"Final scores: {list(state.scores())}; {winner.name} wins")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="ohhell", description="Oh-Hell rules engine CLI.")
    parser.add_argument("--verbose", "-v", action="count", default=0, help="More logging (-v info, -vv debug).")
    subparsers = parser.add_subparsers(dest="command", required=True)
    _add_simulate_parser(subparsers)
    _add_play_parser(subparsers)
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
