import logging
import random
from typing import Dict, List, Optional, Sequence

from config import FALLBACK_MOVE, Settings
from geometry import Coord, in_bounds
from heuristics import Heuristic, TurnContext, apply_first, default_heuristics
from moves import Move
from snapshot import Board, Snake, occupied_cells, opponents, parse_game_state

logger = logging.getLogger(__name__)


class MoveInvariantError(RuntimeError):
    """A cell picked from the safe moves is not one step away from our head."""


def safe_move_coords(board: Board, you: Snake) -> List[Coord]:
    """Cells next to our head that are on the board and not covered by any snake"""
    occupied = occupied_cells(board)
    safe = []
    for move in Move.all():
        coord = move.to_coord(you.head)
        if coord is None or not in_bounds(board, coord):
            continue
        if coord in occupied:
            continue
        safe.append(coord)
    return safe


def to_move(you: Snake, coord: Coord) -> Move:
    move = Move.from_coord(you.head, coord)
    if move is None:
        raise MoveInvariantError(f"{coord!r} is not a step from head {you.head!r}")
    return move


def decide_move(board: Board, you: Snake, rng: Optional[random.Random] = None,
                heuristics: Optional[Sequence[Heuristic]] = None) -> Move:
    """Pick this turn's move.

    Starts from a random safe move and lets the first matching heuristic
    override it. With no safe move at all, FALLBACK_MOVE is returned.
    """
    if rng is None:
        rng = random
    if heuristics is None:
        heuristics = default_heuristics()

    safe = safe_move_coords(board, you)
    if not safe:
        logger.warning("%s - There are no safe moves, we are dead :(", you.name)
        return FALLBACK_MOVE
    logger.debug("%s - Safe Moves: %r", you.name, safe)

    chosen = rng.choice(safe)

    ctx = TurnContext(
        you=you,
        opponents=opponents(board, you),
        food=board.food,
        safe_moves=safe,
    )
    picked = apply_first(heuristics, ctx)
    if picked is not None:
        chosen = picked

    return to_move(you, chosen)


class BattlesnakeLogic:
    def __init__(self, settings: Optional[Settings] = None, rng: Optional[random.Random] = None,
                 heuristics: Optional[Sequence[Heuristic]] = None):
        self.settings = settings or Settings()
        if rng is None and self.settings.random_seed is not None:
            rng = random.Random(self.settings.random_seed)
        self.rng = rng
        if heuristics is None:
            heuristics = default_heuristics(self.settings.solo_food_seeking)
        self.heuristics = list(heuristics)

    def info(self) -> Dict:
        """Appearance shown on play.battlesnake.com"""
        logger.info("INFO")
        return self.settings.info()

    def on_game_start(self, game_state: Dict):
        state = parse_game_state(game_state)
        logger.info("GAME START %s (%s)", state.game.id, state.you.name)

    def on_game_end(self, game_state: Dict):
        state = parse_game_state(game_state)
        logger.info("GAME OVER %s after %d turns", state.game.id, state.turn)

    def get_move(self, game_state: Dict) -> str:
        """Main function to determine the next move"""
        state = parse_game_state(game_state)
        move = decide_move(state.board, state.you, rng=self.rng, heuristics=self.heuristics)
        logger.info("%s - MOVE %d: %s", state.you.name, state.turn, move)
        return str(move)
