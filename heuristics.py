"""Priority-ordered move heuristics.

Each heuristic pairs a condition on the current turn with a way of picking a
cell out of the safe moves. The engine runs the first heuristic whose
condition holds; later ones are not looked at even if it declines to pick.
"""
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional, Sequence

from config import GROWTH_MARGIN
from geometry import Coord, manhattan_distance, select_away, select_toward
from snapshot import Snake, longest_length, nearest_snake

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TurnContext:
    you: Snake
    opponents: Sequence[Snake]
    food: Sequence[Coord]
    safe_moves: Sequence[Coord]

    @property
    def longest_opponent(self) -> int:
        return longest_length(list(self.opponents))


@dataclass(frozen=True)
class Heuristic:
    name: str
    applies: Callable[[TurnContext], bool]
    select: Callable[[TurnContext], Optional[Coord]]


def is_growing(ctx: TurnContext) -> bool:
    return ctx.you.length < ctx.longest_opponent + GROWTH_MARGIN and len(ctx.food) > 0


def is_dominant(ctx: TurnContext) -> bool:
    return ctx.you.length > ctx.longest_opponent and len(ctx.opponents) > 0


def is_outsized(ctx: TurnContext) -> bool:
    return ctx.you.length < ctx.longest_opponent


def race_for_food(ctx: TurnContext) -> Optional[Coord]:
    """Go for the nearest food if we get there first, otherwise back off"""
    closest_food = select_toward(ctx.food, ctx.you.head)
    if not ctx.opponents:
        return None

    distance_to_food = manhattan_distance(ctx.you.head, closest_food)
    rival = nearest_snake(list(ctx.opponents), closest_food)
    if distance_to_food < manhattan_distance(rival.head, closest_food):
        logger.info("%s - Going for food at %r", ctx.you.name, closest_food)
        return select_toward(ctx.safe_moves, closest_food)

    logger.info("%s - Running away from enemy at %r", ctx.you.name, rival.head)
    return select_away(ctx.safe_moves, rival.head)


def seek_food(ctx: TurnContext) -> Optional[Coord]:
    """Like race_for_food, but heads for food when nobody else is around"""
    if ctx.opponents:
        return race_for_food(ctx)
    closest_food = select_toward(ctx.food, ctx.you.head)
    logger.info("%s - Going for food at %r", ctx.you.name, closest_food)
    return select_toward(ctx.safe_moves, closest_food)


def hunt_head(ctx: TurnContext) -> Optional[Coord]:
    """Chase the closest head, we win the head-to-head"""
    enemy_head = nearest_snake(list(ctx.opponents), ctx.you.head).head
    logger.info("%s - Going for the head of enemy at %r", ctx.you.name, enemy_head)
    return select_toward(ctx.safe_moves, enemy_head)


def flee_head(ctx: TurnContext) -> Optional[Coord]:
    enemy_head = nearest_snake(list(ctx.opponents), ctx.you.head).head
    logger.info("%s - Running away from enemy at %r", ctx.you.name, enemy_head)
    return select_away(ctx.safe_moves, enemy_head)


def default_heuristics(solo_food_seeking: bool = False) -> List[Heuristic]:
    """Growth, then dominant, then defensive"""
    return [
        Heuristic('growth', is_growing, seek_food if solo_food_seeking else race_for_food),
        Heuristic('dominant', is_dominant, hunt_head),
        Heuristic('defensive', is_outsized, flee_head),
    ]


def apply_first(heuristics: Sequence[Heuristic], ctx: TurnContext) -> Optional[Coord]:
    """Run the first heuristic that applies, None if none did or it passed"""
    for heuristic in heuristics:
        if heuristic.applies(ctx):
            logger.debug("%s - Heuristic: %s", ctx.you.name, heuristic.name)
            return heuristic.select(ctx)
    return None
