from __future__ import annotations

import argparse
from typing import List, Optional

from .state import GameSession


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description='Pawns-Only Chess for two players at one terminal')
    parser.add_argument('--white', default=None, help="First (White) player's name")
    parser.add_argument('--black', default=None, help="Second (Black) player's name")
    parser.add_argument('--verbose', action='store_true', help='Print engine traces for accepted moves')
    args = parser.parse_args(argv)

    def ask(question: str) -> str:
        print(question)
        return input().strip()

    print('Pawns-Only Chess')
    try:
        white = args.white if args.white is not None else ask("First Player's name:")
        black = args.black if args.black is not None else ask("Second Player's name:")
    except EOFError:
        return

    session = GameSession(white_name=white, black_name=black)
    print(session.board.pretty())

    while not session.finished:
        mover = session.turn
        try:
            line = ask(f"{session.current_name}'s turn:")
        except EOFError:
            break
        report = session.submit(line)
        for msg in report.messages:
            print(msg)
        if args.verbose and report.applied is not None:
            extra = ' (en passant)' if report.applied.en_passant else ''
            print(f"[engine] {mover.value} played {report.applied.move}{extra}; outcome={session.outcome.value}")
        if args.verbose and report.rejected is not None:
            print(f"[engine] rejected {line!r}: {report.rejected.reason.value}")


if __name__ == '__main__':
    main()
