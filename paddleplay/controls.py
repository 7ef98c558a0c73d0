"""On-screen game controls: play/pause and sound toggles."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Sequence

BUTTON_SIZE = 64.0
BUTTON_GAP = 10.0
BUTTON_PADDING = 16.0
PANEL_PADDING = 40.0

SPRITE_PAUSE = "sprites/pause.png"
SPRITE_PLAY = "sprites/play.png"
SPRITE_SOUND_ON = "sprites/sound_on.png"
SPRITE_SOUND_OFF = "sprites/sound_off.png"


class GamePlayState(enum.Enum):
    """Whether the game is running or paused."""

    PLAYING = "playing"
    PAUSED = "paused"

    def toggled(self) -> "GamePlayState":
        """Return the opposite state."""
        if self is GamePlayState.PLAYING:
            return GamePlayState.PAUSED
        return GamePlayState.PLAYING


class SoundSetting(enum.Enum):
    """Whether game sounds are on or off."""

    ON = "on"
    OFF = "off"

    def toggled(self) -> "SoundSetting":
        """Return the opposite setting."""
        if self is SoundSetting.ON:
            return SoundSetting.OFF
        return SoundSetting.ON


class ButtonPurpose(enum.Enum):
    """What an on-screen control button does."""

    TOGGLE_PLAY = "toggle_play"
    TOGGLE_SOUND = "toggle_sound"


@dataclass(frozen=True)
class Button:
    """A rectangular button, given by its top-left corner and size."""

    purpose: ButtonPurpose
    x: float
    y: float
    width: float = BUTTON_SIZE
    height: float = BUTTON_SIZE

    def contains(self, point: Sequence[float]) -> bool:
        """Return True if the (x, y) point lies inside the button, edges included."""
        px, py = point
        return self.x <= px <= self.x + self.width and self.y <= py <= self.y + self.height


class GameControls:
    """Holds the play and sound states and responds to button presses."""

    def __init__(
        self,
        play_state: GamePlayState = GamePlayState.PLAYING,
        sound: SoundSetting = SoundSetting.ON,
    ) -> None:
        self.play_state = play_state
        self.sound = sound

    def press(self, purpose: ButtonPurpose) -> None:
        """Toggle the state that the pressed button controls."""
        purpose = ButtonPurpose(purpose)
        if purpose is ButtonPurpose.TOGGLE_PLAY:
            self.play_state = self.play_state.toggled()
        else:
            self.sound = self.sound.toggled()

    def button_image(self, purpose: ButtonPurpose) -> str:
        """Return the sprite path the button shows for the current state."""
        purpose = ButtonPurpose(purpose)
        if purpose is ButtonPurpose.TOGGLE_PLAY:
            return SPRITE_PAUSE if self.play_state is GamePlayState.PLAYING else SPRITE_PLAY
        return SPRITE_SOUND_ON if self.sound is SoundSetting.ON else SPRITE_SOUND_OFF

    def __repr__(self) -> str:
        return f"GameControls(play_state={self.play_state!r}, sound={self.sound!r})"