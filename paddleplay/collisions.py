"""Collision events between the game's physical actors and a readable way to test them."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DIRECTION_BACKWARD = -1.0
DIRECTION_FORWARD = 1.0


class PhysicalInteractionActor(enum.Enum):
    """Actors that may physically interact with one another."""

    BALL = enum.auto()
    CEILING = enum.auto()
    FLOOR = enum.auto()
    NONE = enum.auto()
    PADDLE = enum.auto()
    SIDE_WALL = enum.auto()


@dataclass(frozen=True)
class CollisionEvent:
    """A collision between two actors, e.g. the ball and the floor."""

    source: PhysicalInteractionActor
    target: PhysicalInteractionActor


class CollisionEvaluator:
    """Plain-language evaluation of a collision event.

    ``evaluator.did(BALL).collide_with(CEILING).or_(SIDE_WALL).evaluate()``
    """

    def __init__(self, event: CollisionEvent) -> None:
        self._event = event
        self._source: PhysicalInteractionActor | None = None
        self._targets: list[PhysicalInteractionActor] = []

    def did(self, actor: PhysicalInteractionActor) -> "CollisionEvaluator":
        """Set the source actor of the phrase."""
        self._source = actor
        return self

    def collide_with(self, target: PhysicalInteractionActor) -> "CollisionEvaluator":
        """Add a possible target actor to the phrase."""
        self._targets.append(target)
        return self

    def or_(self, target: PhysicalInteractionActor) -> "CollisionEvaluator":
        """Add another possible target actor; the same as collide_with()."""
        return self.collide_with(target)

    def evaluate(self) -> bool:
        """Evaluate the phrase, then clear it so another can be built."""
        if self._source is None:
            logger.warning(
                "evaluate() called before requisite call to did(), collide_with() and/or or_()"
            )
            result = False
        else:
            result = self._event.source == self._source and self._event.target in self._targets
        self._source = None
        self._targets.clear()
        return result