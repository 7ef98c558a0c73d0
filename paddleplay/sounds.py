"""Sound effects played in response to collisions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from paddleplay.collisions import CollisionEvaluator, CollisionEvent, PhysicalInteractionActor

SOUND_BALL_MISSED = "audio/impactBell_heavy_001.ogg"
SOUND_PADDLE_HIT = "audio/impactGlass_medium_000.ogg"
SOUND_TOP_OR_SIDE_WALL_HIT = "audio/impactMetal_medium_004.ogg"

_BALL = PhysicalInteractionActor.BALL


@dataclass(frozen=True)
class CollisionSounds:
    """Preloaded sound handles for each kind of collision."""

    ball_missed: Any
    paddle_hit: Any
    ceiling_or_side_wall_hit: Any


def sound_for_event(event: CollisionEvent) -> Optional[str]:
    """Return the path of the sound effect for a collision, or None if it makes no sound."""
    evaluator = CollisionEvaluator(event)
    if (
        evaluator.did(_BALL)
        .collide_with(PhysicalInteractionActor.CEILING)
        .or_(PhysicalInteractionActor.SIDE_WALL)
        .evaluate()
    ):
        return SOUND_TOP_OR_SIDE_WALL_HIT
    if evaluator.did(_BALL).collide_with(PhysicalInteractionActor.FLOOR).evaluate():
        return SOUND_BALL_MISSED
    if evaluator.did(_BALL).collide_with(PhysicalInteractionActor.PADDLE).evaluate():
        return SOUND_PADDLE_HIT
    return None


class SoundPlayer:
    """Loads the collision sounds once and plays the right one for each event."""

    def __init__(self, loader: Callable[[str], Any]) -> None:
        self.sounds = CollisionSounds(
            ball_missed=loader(SOUND_BALL_MISSED),
            paddle_hit=loader(SOUND_PADDLE_HIT),
            ceiling_or_side_wall_hit=loader(SOUND_TOP_OR_SIDE_WALL_HIT),
        )
        self._by_path = {
            SOUND_BALL_MISSED: self.sounds.ball_missed,
            SOUND_PADDLE_HIT: self.sounds.paddle_hit,
            SOUND_TOP_OR_SIDE_WALL_HIT: self.sounds.ceiling_or_side_wall_hit,
        }

    def handle_events(self, events: Iterable[CollisionEvent]) -> list[Any]:
        """Play a sound for each event that has one; return the sounds played, in order."""
        played = []
        for event in events:
            path = sound_for_event(event)
            if path is None:
                continue
            sound = self._by_path[path]
            sound.play()
            played.append(sound)
        return played