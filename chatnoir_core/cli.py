from __future__ import annotations

import argparse
import logging
from typing import Optional

from .board import Coord
from .deal import STARTING_BLOCKERS
from .engine import ChatNoirGame
from .events import CatMoved, Event


def parse_coord(text: str) -> Optional[Coord]:
    """Parses 'r,c' or 'r c'. Returns None when the text is not two integers."""
    sep = ',' if ',' in text else ' '
    parts = [t for t in text.split(sep) if t.strip() != '']
    if len(parts) != 2:
        return None
    try:
        return (int(parts[0]), int(parts[1]))
    except ValueError:
        return None


def _announce(event: Event) -> None:
    if isinstance(event, CatMoved):
        print(f"The cat moves {event.origin} -> {event.dest}, facing {event.facing}.")


def main(argv: Optional[list] = None) -> None:
    parser = argparse.ArgumentParser(description='Chat Noir hot-seat game')
    parser.add_argument('--seed', type=int, default=None, help='RNG seed for the starting blockers')
    parser.add_argument('--blockers', type=int, default=STARTING_BLOCKERS, help='Number of starting blockers')
    parser.add_argument('--log-level', default='WARNING', help='Logging level (DEBUG, INFO, ...)')
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level.upper(), format='%(levelname)s %(name)s: %(message)s')

    game = ChatNoirGame(seed=args.seed, blockers=args.blockers)
    game.subscribe(_announce)
    try:
        game.initialize()
    except (ValueError, RuntimeError) as e:
        parser.error(str(e))
    print(game.title())

    while True:
        state = game.state
        print(state.board.pretty(state.cat, state.blocked))
        print(game.status_text())
        if game.is_terminal():
            answer = input('Play again? [y/N] ').strip().lower()
            if answer not in ('y', 'yes'):
                return
            game.reset()
            continue

        text = input('Enter a cell as r,c or r c (q to quit): ').strip()
        if text.lower() in ('q', 'quit'):
            return
        coord = parse_coord(text)
        if coord is None:
            print('Could not parse. Try again.')
            continue
        result = game.submit_move(*coord)
        if not result.ok:
            print(result.message)


if __name__ == '__main__':
    main()
