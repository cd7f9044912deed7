"""
Sound cues as short synthesized tones.

Each cue is a (frequency, duration, waveform) triple rendered once into a
``pygame.mixer.Sound`` with a decaying envelope. Without a working mixer
the manager stays silent.
"""

import array
import logging
import math

import pygame

from neon_breakout.interfaces import Cue

logger = logging.getLogger(__name__)

SAMPLE_RATE = 44100

CUE_TONES = {
    #                 Hz    seconds  waveform
    Cue.BOUNCE:      (400, 0.10, "square"),
    Cue.BRICK_BREAK: (600, 0.15, "sawtooth"),
    Cue.LIFE_LOST:   (200, 0.30, "sawtooth"),
    Cue.POWER_UP:    (800, 0.20, "sine"),
}

GAIN_START, GAIN_END = 0.3, 0.01


def tone_samples(freq, dur, shape="sine", sample_rate=SAMPLE_RATE):
    """Mono signed 16-bit samples with gain falling exponentially 0.3 -> 0.01."""
    n = max(1, int(sample_rate * dur))
    decay = math.log(GAIN_END / GAIN_START)
    buf = array.array('h')
    for i in range(n):
        t = i / sample_rate
        cycle = (freq * t) % 1.0
        if shape == "square":
            s = 1.0 if cycle < 0.5 else -1.0
        elif shape == "sawtooth":
            s = 2.0 * cycle - 1.0
        elif shape == "sine":
            s = math.sin(2 * math.pi * cycle)
        else:
            raise ValueError(f"unknown waveform: {shape!r}")
        gain = GAIN_START * math.exp(decay * i / n)
        buf.append(int(s * gain * 32767))
    return buf


class SoundManager:
    """Plays named cues through pygame.mixer; a silent no-op if audio is unavailable."""

    def __init__(self):
        self._cache = {}
        if not pygame.mixer.get_init():
            try:
                pygame.mixer.init(SAMPLE_RATE, -16, 2, 512)
            except pygame.error as exc:
                logger.warning("Audio disabled: %s", exc)
                return
        rate, _, channels = pygame.mixer.get_init()
        for cue, (freq, dur, shape) in CUE_TONES.items():
            mono = tone_samples(freq, dur, shape, rate)
            frames = array.array('h')
            for s in mono:
                frames.extend([s] * channels)
            self._cache[cue] = pygame.mixer.Sound(buffer=frames.tobytes())

    @property
    def enabled(self) -> bool:
        return bool(self._cache)

    def play_cue(self, cue: Cue):
        snd = self._cache.get(cue)
        if snd:
            snd.play()
