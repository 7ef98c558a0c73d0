"""Game score kept in step with collisions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from paddleplay.collisions import CollisionEvaluator, CollisionEvent, PhysicalInteractionActor

MAX_DEMERITS_FOR_MISSING_BALL = 5
MAX_POINTS_TO_GRANT_FOR_RETURNING_BALL = 5

SCOREBOARD_FONT_SIZE = 35.0
SCOREBOARD_TEXT_COLOR = "2f2f2f"
SCOREBOARD_LEFT = 30.0
SCOREBOARD_TOP = 30.0
SCOREBOARD_LABEL = "Score: "

_BALL = PhysicalInteractionActor.BALL


@dataclass
class Scoreboard:
    """The player's score: points for returning the ball, demerits for missing it."""

    score: int = 0

    def handle_events(self, events: Iterable[CollisionEvent]) -> None:
        """Update the score from a batch of collision events."""
        for event in events:
            evaluator = CollisionEvaluator(event)
            if evaluator.did(_BALL).collide_with(PhysicalInteractionActor.FLOOR).evaluate():
                self.score = max(0, self.score - MAX_DEMERITS_FOR_MISSING_BALL)
            elif evaluator.did(_BALL).collide_with(PhysicalInteractionActor.PADDLE).evaluate():
                self.score += MAX_POINTS_TO_GRANT_FOR_RETURNING_BALL

    def label(self) -> str:
        """Return the text shown on screen."""
        return f"{SCOREBOARD_LABEL}{self.score}"