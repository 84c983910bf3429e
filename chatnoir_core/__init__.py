"""
Chat Noir core Python package.

The rules engine of Chat Noir: the cat tries to reach the edge of a
hexagonal board while the owner places blockers to trap it.
Modules:
- board.py: HexBoard, Cell, Coord and the graph builder
- state.py: GameState
- moves.py: escape test, legality checks, cat facing
- deal.py: random solvable starting positions
- events.py: events produced for observers
- engine.py: ChatNoirGame, the stateful engine
- cli.py: hot-seat command line game
"""
