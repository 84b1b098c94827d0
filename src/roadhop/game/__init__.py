"""Gameplay core: lanes, entities, world scroll and the session loop."""

from roadhop.game.characters import CharacterType, Facing
from roadhop.game.entities import MoveResult, Player, Tree, Vehicle
from roadhop.game.grid import Grid
from roadhop.game.lane import GroundType, Lane
from roadhop.game.session import GameSession
from roadhop.game.world import World

__all__ = [
    "CharacterType",
    "Facing",
    "GameSession",
    "Grid",
    "GroundType",
    "Lane",
    "MoveResult",
    "Player",
    "Tree",
    "Vehicle",
    "World",
]
