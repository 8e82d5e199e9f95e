"""
Pawns-Only Chess core Python package.

Pure rules for a chess variant played with pawns alone, kept free of any
console or HTTP concerns so it can be driven from the CLI, the Flask app or
tests alike.
Modules:
- coord.py: Coord
- move.py: Move and its shape predicates
- board.py: Board, Piece, Color
- rules.py: move legality, move application, mobility search
- outcome.py: GameOutcome and classify()
- action.py: parsing one input line into an action
- state.py: GameSession, the turn-by-turn driver
"""
