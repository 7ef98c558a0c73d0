"""The Pong game: its state, its per-frame update and the window that shows it."""

from __future__ import annotations

import argparse
import os
import random
from pathlib import Path
from typing import Any, Optional, Sequence

from paddleplay.ball import BALL_DIAMETER, BALL_RADIUS, BALL_SPRITE, spawn_ball
from paddleplay.collisions import DIRECTION_BACKWARD, DIRECTION_FORWARD, CollisionEvent
from paddleplay.controls import (
    BUTTON_GAP,
    BUTTON_SIZE,
    PANEL_PADDING,
    Button,
    ButtonPurpose,
    GameControls,
    GamePlayState,
    SoundSetting,
)
from paddleplay.paddle import PADDLE_HEIGHT, PADDLE_SPRITE, PADDLE_WIDTH, spawn_paddle
from paddleplay.physics import ball_and_paddle_interaction, ball_and_wall_interaction
from paddleplay.scoreboard import (
    SCOREBOARD_FONT_SIZE,
    SCOREBOARD_LEFT,
    SCOREBOARD_TEXT_COLOR,
    SCOREBOARD_TOP,
    Scoreboard,
)
from paddleplay.sounds import SoundPlayer

WINDOW_TITLE = "Pong"
BACKGROUND_COLOR = "6d2abc"
DEFAULT_WIDTH = 1280
DEFAULT_HEIGHT = 720
ASSETS_DIR = Path("assets")
FRAMES_PER_SECOND = 60


class PongGame:
    """Everything in a game of Pong, in world coordinates with y pointing up."""

    def __init__(self, width: float, height: float, rng: Optional[Any] = None) -> None:
        if width < PADDLE_WIDTH:
            raise ValueError(f"window width {width} is narrower than the paddle")
        if height <= BALL_DIAMETER:
            raise ValueError(f"window height {height} leaves no room for the ball")
        self.width = width
        self.height = height
        rng = rng if rng is not None else random.Random()
        self.ball = spawn_ball(width, height, rng)
        self.paddle = spawn_paddle(width)
        self.scoreboard = Scoreboard()
        self.controls = GameControls(GamePlayState.PLAYING, SoundSetting.ON)
        sound_x = width - PANEL_PADDING - BUTTON_SIZE
        play_x = sound_x - BUTTON_GAP - BUTTON_SIZE
        self.buttons = [
            Button(ButtonPurpose.TOGGLE_PLAY, play_x, PANEL_PADDING),
            Button(ButtonPurpose.TOGGLE_SOUND, sound_x, PANEL_PADDING),
        ]

    @property
    def playing(self) -> bool:
        """True unless the game is paused."""
        return self.controls.play_state is GamePlayState.PLAYING

    def update(self, dt: float, left_pressed: bool, right_pressed: bool) -> list[CollisionEvent]:
        """Advance the game by ``dt`` seconds; return the collisions that happened."""
        if not self.playing:
            return []
        self.ball.move(dt)
        if left_pressed:
            self.paddle.move(DIRECTION_BACKWARD, dt, self.width)
        elif right_pressed:
            self.paddle.move(DIRECTION_FORWARD, dt, self.width)

        events = [
            event
            for event in (
                ball_and_paddle_interaction(self.ball, self.paddle),
                ball_and_wall_interaction(self.ball, self.width, self.height),
            )
            if event is not None
        ]
        self.scoreboard.handle_events(events)
        return events

    def click(self, point: Sequence[float]) -> Optional[ButtonPurpose]:
        """Press the button under ``point`` (screen coordinates, y down); return its purpose."""
        for button in self.buttons:
            if button.contains(point):
                self.controls.press(button.purpose)
                return button.purpose
        return None

    def to_screen(self, x: float, y: float) -> tuple[float, float]:
        """Convert world coordinates to screen coordinates for a camera centred on the window."""
        return x, self.height - y


class _Images:
    """Loads sprites on demand; a sprite that cannot be loaded is remembered as missing."""

    def __init__(self, pygame: Any) -> None:
        self._pygame = pygame
        self._cache: dict[str, Any] = {}

    def get(self, relative_path: str) -> Any:
        if relative_path not in self._cache:
            try:
                image = self._pygame.image.load(str(ASSETS_DIR / relative_path)).convert_alpha()
            except (self._pygame.error, FileNotFoundError, OSError):
                image = None
            self._cache[relative_path] = image
        return self._cache[relative_path]


def _load_sound_player(pygame: Any) -> Optional[SoundPlayer]:
    try:
        pygame.mixer.init()
        return SoundPlayer(lambda path: pygame.mixer.Sound(str(ASSETS_DIR / path)))
    except (pygame.error, FileNotFoundError, OSError):
        return None


def _draw(pygame: Any, screen: Any, game: PongGame, images: _Images, font: Any) -> None:
    screen.fill(pygame.Color(f"#{BACKGROUND_COLOR}"))

    paddle_x, paddle_y = game.to_screen(game.paddle.x, game.paddle.y)
    paddle_rect = pygame.Rect(0, 0, PADDLE_WIDTH, PADDLE_HEIGHT)
    paddle_rect.center = (round(paddle_x), round(paddle_y))
    paddle_image = images.get(PADDLE_SPRITE)
    if paddle_image is None:
        pygame.draw.rect(screen, pygame.Color("white"), paddle_rect)
    else:
        screen.blit(paddle_image, paddle_image.get_rect(center=paddle_rect.center))

    ball_x, ball_y = game.to_screen(game.ball.position.x, game.ball.position.y)
    ball_center = (round(ball_x), round(ball_y))
    ball_image = images.get(BALL_SPRITE)
    if ball_image is None:
        pygame.draw.circle(screen, pygame.Color("white"), ball_center, round(BALL_RADIUS))
    else:
        screen.blit(ball_image, ball_image.get_rect(center=ball_center))

    label = font.render(game.scoreboard.label(), True, pygame.Color(f"#{SCOREBOARD_TEXT_COLOR}"))
    screen.blit(label, (SCOREBOARD_LEFT, SCOREBOARD_TOP))

    for button in game.buttons:
        rect = pygame.Rect(button.x, button.y, button.width, button.height)
        image = images.get(game.controls.button_image(button.purpose))
        if image is None:
            pygame.draw.rect(screen, pygame.Color("white"), rect, width=1)
        else:
            screen.blit(image, image.get_rect(center=rect.center))

    pygame.display.flip()


def run(width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> None:
    """Open the game window and play until it is closed or Escape is pressed."""
    os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(WINDOW_TITLE)
        game = PongGame(width, height)
        images = _Images(pygame)
        font = pygame.font.Font(None, round(SCOREBOARD_FONT_SIZE))
        sound_player = _load_sound_player(pygame)
        clock = pygame.time.Clock()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
                elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                    running = False
                elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    game.click(event.pos)
            if not running:
                break

            dt = clock.tick(FRAMES_PER_SECOND) / 1000.0
            keys = pygame.key.get_pressed()
            collisions = game.update(dt, bool(keys[pygame.K_LEFT]), bool(keys[pygame.K_RIGHT]))
            if sound_player is not None and game.controls.sound is SoundSetting.ON:
                sound_player.handle_events(collisions)
            _draw(pygame, screen, game, images, font)
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the command line and start the game."""
    parser = argparse.ArgumentParser(prog="paddleplay", description="Play Pong.")
    parser.add_argument("--width", type=int, default=DEFAULT_WIDTH, help="window width in pixels")
    parser.add_argument("--height", type=int, default=DEFAULT_HEIGHT, help="window height in pixels")
    args = parser.parse_args(argv)
    run(args.width, args.height)
    return 0