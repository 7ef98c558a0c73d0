# paddleplay

A small arcade game: keep the ball in play with a paddle along the bottom of
the window. Each time the paddle returns the ball you gain 5 points; each time
the ball hits the floor you lose 5 points, and the score never drops below
zero. On every bounce the ball's direction picks up a small random change and
a slight downward pull.

## Installing

```
pip install .
```

## Playing

```
paddleplay
paddleplay --width 1024 --height 768
```

The window is 1280 x 720 pixels unless `--width` and `--height` say
otherwise.

- Left / Right arrow keys move the paddle; it stays inside the window.
- The two buttons in the top-right corner pause or resume play and turn
  sound on or off. The game starts playing, with sound on.
- Escape, or closing the window, ends the game.

Sprites and sounds are looked up under an `assets/` directory relative to the
current working directory (`assets/sprites/...` and `assets/audio/...`).
A sprite that cannot be loaded is drawn as a plain white shape instead; if the
sounds cannot be loaded, the game plays silently.

## Using the pieces in code

The game logic runs without a window, so it can be driven from scripts or
tests. World coordinates have y pointing up.

```python
import random
from paddleplay.game import PongGame

game = PongGame(800, 600, random.Random(1))
collisions = game.update(1 / 60, left_pressed=False, right_pressed=True)
print(game.scoreboard.label())      # "Score: 0"
game.click((700, 60))               # press the button under a screen point
print(game.controls.play_state)
```

`PongGame.update` returns the `CollisionEvent`s of that frame and does nothing
while paused. `PongGame.click` takes screen coordinates (y down) and returns
the `ButtonPurpose` of the button pressed, or `None`.

The modules the game is built from:

- `paddleplay.geometry` – `Vec2` and `circle_intersects_aabb`.
- `paddleplay.collisions` – `PhysicalInteractionActor`, `CollisionEvent` and
  `CollisionEvaluator`, which reads as
  `CollisionEvaluator(event).did(BALL).collide_with(CEILING).or_(SIDE_WALL).evaluate()`.
- `paddleplay.ball` – `Ball` and `spawn_ball`.
- `paddleplay.paddle` – `Paddle` and `spawn_paddle`.
- `paddleplay.physics` – `ball_and_wall_interaction` and
  `ball_and_paddle_interaction`, each returning a `CollisionEvent` or `None`.
- `paddleplay.controls` – `GamePlayState`, `SoundSetting`, `ButtonPurpose`,
  `Button` and `GameControls`.
- `paddleplay.scoreboard` – `Scoreboard`.
- `paddleplay.sounds` – `sound_for_event`, `CollisionSounds` and
  `SoundPlayer`, which loads each sound through a loader you pass in and calls
  `play()` on the one matching each event.

## Other helpers

- `paddleplay.verification_code.generate_verification_code()` returns a
  random six-digit code as a string.
- `paddleplay.status_text.StatusText` holds a line of status text.
  `set_text(text, duration)` shows it; with a duration (seconds or a
  `timedelta`), it is blanked once `tick(dt)` has let that much time pass.
  `clear()` blanks it at once. Negative durations raise `ValueError`.
- `paddleplay.publisher.Publisher` publishes MQTT messages to one broker, or
  to every distinct broker given to `Publisher.for_simulcast(...)`. Each broker
  is described by a `BrokerInfo` (address, queue capacity, port, keep-alive in
  seconds, `MqttProtocolVersion.V3` or `V5`). `publish` and
  `publish_with_payload` are coroutines; `PublisherQoS.AT_MOST_ONCE` is sent as
  at-least-once. If any broker fails, a `PublishError` is raised whose
  `errors` list holds each `PublisherError` (`FailedToMessageError`, or
  `ClientNotConfiguredError` after `close()`). A `Publisher` can be used as a
  context manager, which closes its connections on exit. A custom
  `client_factory` may be passed to supply the underlying client.

```python
import asyncio
from paddleplay.publisher import BrokerInfo, MqttProtocolVersion, Publisher, PublisherQoS

broker = BrokerInfo("localhost", 10, 1883, 5.0, MqttProtocolVersion.V5)
with Publisher(broker) as publisher:
    asyncio.run(publisher.publish_with_payload("hello", "demo/topic", PublisherQoS.AT_LEAST_ONCE))
```

## What it does not do

- It does not ship the image and sound files; without them the game draws
  plain shapes and plays no sound.
- There is only one player and one paddle; there is no second player,
  network play or saved high score.
- The publisher only sends messages; it does not subscribe or run a broker.

## Running the tests

```
pip install .[test]
pytest
```