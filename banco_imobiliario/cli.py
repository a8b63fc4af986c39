#!/usr/bin/env python3
"""
Console front end for a hot-seat game.

All prompting and printing lives here; every rule is decided by the
engine. Rule constants come from the environment (see `settings`).
"""

import argparse
import logging
import random
from typing import Callable, List, Optional, Sequence

from banco_imobiliario.config import GameRules
from banco_imobiliario.exceptions import GameSetupError
from banco_imobiliario.game import GameState, create_game
from banco_imobiliario.settings import get_rules_settings
from banco_imobiliario.snapshot import MovementResult, PlayerView, PropertyView
from banco_imobiliario.turn import JailAction, TurnReport, play_game

YES = {"s", "sim", "y", "yes"}


class ConsoleDecider:
    """Asks a human at the console for every turn decision."""

    def __init__(
        self,
        input_fn: Callable[[str], str] = input,
        print_fn: Callable[[str], None] = print,
    ):
        self.input = input_fn
        self.print = print_fn

    def _confirm(self, prompt: str) -> bool:
        return self.input(prompt).strip().lower() in YES

    def choose_jail_action(self, player: PlayerView) -> JailAction:
        self.print(f"{player.name} is in jail.")
        self.print("  1 - Use a get-out-of-jail card")
        self.print("  2 - Roll for doubles")
        self.print("  3 - Pass")
        choice = self.input("Option: ").strip()
        if choice == "1":
            return JailAction.USE_CARD
        if choice == "2":
            return JailAction.ROLL
        return JailAction.PASS

    def confirm_purchase(self, player: PlayerView, movement: MovementResult) -> bool:
        return self._confirm(f"Buy {movement.space_name} (if available)? [y/n]: ")

    def confirm_build(self, player: PlayerView, movement: MovementResult) -> bool:
        return self._confirm(f"Build on {movement.space_name} (if yours)? [y/n]: ")

    def choose_sale(self, player: PlayerView, properties: List[PropertyView]) -> Optional[str]:
        if not self._confirm("Sell a property to the bank? [y/n]: "):
            return None
        for number, prop in enumerate(properties, start=1):
            hotel = " + hotel" if prop.has_hotel else ""
            self.print(f"  {number} - {prop.name} (houses: {prop.houses}{hotel})")
        raw = self.input("Property number: ").strip()
        if not raw.isdigit() or not 1 <= int(raw) <= len(properties):
            self.print("Invalid choice.")
            return None
        return properties[int(raw) - 1].name


def print_turn_header(view: PlayerView, print_fn: Callable[[str], None] = print) -> None:
    jailed = " (in jail)" if view.in_jail else ""
    print_fn("\n" + "=" * 60)
    print_fn(f"{view.name}{jailed} | ${view.balance} | position {view.position} | {view.property_count} properties")
    print_fn("=" * 60)


def print_turn_report(report: TurnReport, print_fn: Callable[[str], None] = print) -> None:
    if report.dice:
        print_fn(f"Rolled {report.dice[0]} + {report.dice[1]}")
    if report.movement:
        print_fn(f"Moved to {report.movement.position} - {report.movement.space_name}")
    if report.landing and report.landing.rent_paid:
        print_fn(f"Paid ${report.landing.rent_paid} rent to {report.landing.rent_owner}")
    if report.jail_action is not None:
        print_fn("Released from jail." if report.released else "Still in jail.")


def print_game_summary(game: GameState, print_fn: Callable[[str], None] = print) -> None:
    """Print final game summary."""
    print_fn("\n" + "=" * 60)
    print_fn("GAME OVER")
    print_fn("=" * 60)

    winner = game.winner()
    print_fn(f"\nWinner: {winner.name}" if winner else "\nNo winner")

    print_fn("\nFinal Standings:")
    for view in game.players_snapshot():
        print_fn(f"  {view.name}: ${view.balance} | {view.property_count} properties")
    print_fn(f"\nTotal Turns: {game.turn_number}")


def ask_player_names(
    rules: GameRules,
    input_fn: Callable[[str], str] = input,
) -> List[str]:
    """Prompt for the number of players and their names."""
    while True:
        raw = input_fn(f"Number of players ({rules.min_players}-{rules.max_players}): ").strip()
        if raw.isdigit() and rules.min_players <= int(raw) <= rules.max_players:
            break
    names = []
    for seat in range(1, int(raw) + 1):
        name = ""
        while not name:
            name = input_fn(f"Name of player {seat}: ").strip()
        names.append(name)
    return names


def run(
    names: Sequence[str],
    rules: GameRules,
    seed: Optional[int] = None,
    max_turns: Optional[int] = None,
    decider: Optional[ConsoleDecider] = None,
) -> GameState:
    decider = decider or ConsoleDecider()
    game = create_game(names, rules, random.Random(seed))

    play_game(
        game,
        decider,
        max_turns=max_turns,
        before_turn=lambda view: print_turn_header(view, decider.print),
        on_turn=lambda report: print_turn_report(report, decider.print),
    )
    print_game_summary(game, decider.print)
    return game


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Play a hot-seat property trading game")
    parser.add_argument("--players", nargs="+", help="Player names in seat order (prompted if omitted)")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducible dice")
    parser.add_argument("--max-turns", type=int, default=None, help="Stop after this many turns")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    rules = get_rules_settings().to_rules()
    names = args.players or ask_player_names(rules)
    try:
        run(names, rules, seed=args.seed, max_turns=args.max_turns)
    except GameSetupError as exc:
        parser.error(str(exc))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
