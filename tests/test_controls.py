import pytest

from paddleplay.controls import (
    Button,
    ButtonPurpose,
    GameControls,
    GamePlayState,
    SoundSetting,
)


@pytest.mark.parametrize(
    "state, expected",
    [
        (GamePlayState.PLAYING, GamePlayState.PAUSED),
        (GamePlayState.PAUSED, GamePlayState.PLAYING),
    ],
)
def test_play_state_toggle_round_trip(state, expected):
    toggled = GamePlayState.toggled(state)
    assert toggled is expected
    assert GamePlayState.toggled(toggled) is state


@pytest.mark.parametrize(
    "setting, expected",
    [
        (SoundSetting.ON, SoundSetting.OFF),
        (SoundSetting.OFF, SoundSetting.ON),
    ],
)
def test_sound_setting_toggle_round_trip(setting, expected):
    toggled = SoundSetting.toggled(setting)
    assert toggled is expected
    assert SoundSetting.toggled(toggled) is setting


def test_playing_toggles_to_paused():
    assert GamePlayState.PLAYING.toggled() is GamePlayState.PAUSED
    assert SoundSetting.ON.toggled() is SoundSetting.OFF


def test_defaults_are_playing_with_sound_on():
    controls = GameControls()
    assert controls.play_state is GamePlayState.PLAYING
    assert controls.sound is SoundSetting.ON


def test_press_toggle_play_changes_only_play_state():
    controls = GameControls(GamePlayState.PLAYING, SoundSetting.ON)
    controls.press(ButtonPurpose.TOGGLE_PLAY)
    assert controls.play_state is GamePlayState.PAUSED
    assert controls.sound is SoundSetting.ON
    controls.press(ButtonPurpose.TOGGLE_PLAY)
    assert controls.play_state is GamePlayState.PLAYING


def test_press_toggle_sound_changes_only_sound():
    controls = GameControls(GamePlayState.PAUSED, SoundSetting.ON)
    controls.press(ButtonPurpose.TOGGLE_SOUND)
    assert controls.sound is SoundSetting.OFF
    assert controls.play_state is GamePlayState.PAUSED


def test_play_button_images_follow_state():
    controls = GameControls(GamePlayState.PLAYING, SoundSetting.ON)
    assert controls.button_image(ButtonPurpose.TOGGLE_PLAY) == "sprites/pause.png"
    controls.press(ButtonPurpose.TOGGLE_PLAY)
    assert controls.button_image(ButtonPurpose.TOGGLE_PLAY) == "sprites/play.png"


def test_sound_button_images_follow_setting():
    controls = GameControls(GamePlayState.PLAYING, SoundSetting.ON)
    assert controls.button_image(ButtonPurpose.TOGGLE_SOUND) == "sprites/sound_on.png"
    controls.press(ButtonPurpose.TOGGLE_SOUND)
    assert controls.button_image(ButtonPurpose.TOGGLE_SOUND) == "sprites/sound_off.png"


def test_press_rejects_unknown_purpose():
    controls = GameControls()
    with pytest.raises(ValueError):
        controls.press("launch")


def test_button_contains_inside_and_edges():
    button = Button(ButtonPurpose.TOGGLE_PLAY, 100, 40, 64, 64)
    assert button.contains((100, 40))
    assert button.contains((164, 104))
    assert button.contains((130, 70))


def test_button_excludes_outside_points():
    button = Button(ButtonPurpose.TOGGLE_SOUND, 100, 40, 64, 64)
    assert not button.contains((99, 70))
    assert not button.contains((130, 105))
    assert not button.contains((165, 40))