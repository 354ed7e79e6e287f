# audio.py
"""
Procedural sound cues.

Each cue is a short sine chirp whose pitch and volume both glide
exponentially, rendered once with numpy and handed to pygame.mixer.
"""
from __future__ import annotations
import logging

import numpy as np  # type: ignore
import pygame       # type: ignore

logger = logging.getLogger(__name__)

SAMPLE_RATE = 22050

# (start_hz, end_hz, duration_s)
EAT_TONE = (800.0, 1200.0, 0.1)
GAME_OVER_TONE = (400.0, 200.0, 0.3)


def sweep(
    start_hz: float,
    end_hz: float,
    duration_s: float,
    start_gain: float = 0.3,
    end_gain: float = 0.01,
    sample_rate: int = SAMPLE_RATE,
) -> np.ndarray:
    """Return a mono int16 chirp gliding start_hz -> end_hz and start_gain -> end_gain."""
    n = max(1, int(sample_rate * duration_s))
    t = np.arange(n) / sample_rate
    frac = t / duration_s

    ratio = end_hz / start_hz
    if np.isclose(ratio, 1.0):
        phase = 2 * np.pi * start_hz * t
    else:
        # integral of start_hz * ratio**(t / duration_s)
        k = np.log(ratio) / duration_s
        phase = 2 * np.pi * start_hz * (np.exp(k * t) - 1) / k

    gain = start_gain * (end_gain / start_gain) ** frac
    wave = np.sin(phase) * gain
    return (wave * 32767).astype(np.int16)


def _make_sound(samples: np.ndarray) -> pygame.mixer.Sound:
    # Match the mixer's channel count, which may not be the mono we asked for
    _, _, channels = pygame.mixer.get_init()
    if channels > 1:
        samples = np.ascontiguousarray(np.repeat(samples[:, None], channels, axis=1))
    return pygame.sndarray.make_sound(samples)


class PygameSoundEffects:
    def __init__(self) -> None:
        rate = pygame.mixer.get_init()[0]
        self.eat = _make_sound(sweep(*EAT_TONE, sample_rate=rate))
        self.game_over = _make_sound(sweep(*GAME_OVER_TONE, sample_rate=rate))

    def play_eat(self) -> None:
        self.eat.play()

    def play_game_over(self) -> None:
        self.game_over.play()


class SilentSoundEffects:
    def play_eat(self) -> None:
        pass

    def play_game_over(self) -> None:
        pass


def load_sound_effects(enabled: bool = True):
    """Build the sound cues, or silent stand-ins if sound is off or the mixer is unavailable."""
    if not enabled:
        return SilentSoundEffects()
    try:
        if not pygame.mixer.get_init():
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1, buffer=512)
        return PygameSoundEffects()
    except pygame.error as exc:
        logger.warning("Audio disabled: %s", exc)
        return SilentSoundEffects()
