"""Read-only views over the game state sent by the Battlesnake engine.

A fresh snapshot is parsed for every request and thrown away once the move
has been returned. Nothing in here is ever mutated.
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Tuple

from geometry import Coord, manhattan_distance


class GameStateError(ValueError):
    """The request payload does not describe a usable game state."""


@dataclass(frozen=True)
class Snake:
    id: str
    body: Tuple[Coord, ...]
    name: str = ''
    health: int = 100

    def __post_init__(self):
        if not self.body:
            raise GameStateError(f"Snake {self.id!r} has an empty body")

    @property
    def head(self) -> Coord:
        return self.body[0]

    @property
    def tail(self) -> Coord:
        return self.body[-1]

    @property
    def length(self) -> int:
        return len(self.body)


@dataclass(frozen=True)
class Board:
    width: int
    height: int
    food: Tuple[Coord, ...] = ()
    snakes: Tuple[Snake, ...] = ()

    def __post_init__(self):
        if self.width <= 0 or self.height <= 0:
            raise GameStateError(f"Board size must be positive, got {self.width}x{self.height}")


@dataclass(frozen=True)
class Game:
    id: str = ''
    timeout: int = 500
    ruleset: Dict = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class GameState:
    game: Game
    turn: int
    board: Board
    you: Snake


# Accessors used by the decision engine

def occupied_cells(board: Board) -> Set[Coord]:
    """Every cell covered by any snake body, ours included"""
    return {segment for snake in board.snakes for segment in snake.body}


def opponents(board: Board, you: Snake) -> List[Snake]:
    """All snakes on the board except you, in board order"""
    return [snake for snake in board.snakes if snake.id != you.id]


def longest_length(snakes: List[Snake]) -> int:
    """Body length of the longest snake, 0 when there are none"""
    return max((snake.length for snake in snakes), default=0)


def nearest_snake(snakes: List[Snake], target: Coord) -> Optional[Snake]:
    """Snake whose head is closest to target, first one wins on ties"""
    if not snakes:
        return None
    return min(snakes, key=lambda snake: manhattan_distance(snake.head, target))


# Parsing

def _require(data: Dict, key: str, where: str):
    try:
        return data[key]
    except (KeyError, TypeError):
        raise GameStateError(f"Missing '{key}' in {where}") from None


def _object(value, where: str) -> Dict:
    if not isinstance(value, dict):
        raise GameStateError(f"Expected an object for {where}, got {value!r}")
    return value


def _list(value, where: str) -> List:
    if not isinstance(value, list):
        raise GameStateError(f"Expected a list for {where}, got {value!r}")
    return value


def _int(value, where: str) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise GameStateError(f"Expected an integer for {where}, got {value!r}") from None


def parse_coord(data: Dict) -> Coord:
    x = _int(_require(data, 'x', 'coordinate'), 'x')
    y = _int(_require(data, 'y', 'coordinate'), 'y')
    try:
        return Coord(x, y)
    except ValueError as e:
        raise GameStateError(f"Invalid coordinate {data!r}: {e}") from None


def parse_snake(data: Dict) -> Snake:
    data = _object(data, 'snake')
    body = _list(_require(data, 'body', 'snake'), 'snake body')
    return Snake(
        id=str(_require(data, 'id', 'snake')),
        body=tuple(parse_coord(segment) for segment in body),
        name=str(data.get('name', '')),
        health=_int(data.get('health', 100), 'health'),
    )


def parse_board(data: Dict, you: Optional[Snake] = None) -> Board:
    data = _object(data, 'board')
    snakes = tuple(parse_snake(s) for s in _list(data.get('snakes', []), 'snakes'))
    if you is not None and all(s.id != you.id for s in snakes):
        snakes = snakes + (you,)
    return Board(
        width=_int(_require(data, 'width', 'board'), 'width'),
        height=_int(_require(data, 'height', 'board'), 'height'),
        food=tuple(parse_coord(f) for f in _list(data.get('food', []), 'food')),
        snakes=snakes,
    )


def parse_game_state(data: Dict) -> GameState:
    """Build a snapshot from a /start, /move or /end request body"""
    data = _object(data, 'game state')
    you = parse_snake(_require(data, 'you', 'game state'))
    game_data = _object(data.get('game') or {}, 'game')
    game = Game(
        id=str(game_data.get('id', '')),
        timeout=_int(game_data.get('timeout', 500), 'timeout'),
        ruleset=_object(game_data.get('ruleset') or {}, 'ruleset'),
    )
    return GameState(
        game=game,
        turn=_int(data.get('turn', 0), 'turn'),
        board=parse_board(_require(data, 'board', 'game state'), you),
        you=you,
    )
