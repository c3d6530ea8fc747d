# Submarine Dash - Sound System
# Procedural sound effects using pygame and numpy, with optional wav overrides

import logging
import os

import numpy as np
import pygame

from settings import (
    SOUND_ENABLED, SFX_VOLUME, SAMPLE_RATE, ASSETS_DIR, SOUND_FILES, GameEvent
)

logger = logging.getLogger(__name__)


class SoundGenerator:
    """Generates sound effects procedurally using numpy waveforms."""

    def __init__(self, sample_rate=22050, seed=None):
        self.sample_rate = sample_rate
        self.rng = np.random.default_rng(seed)
        self.sounds = {}

    def generate_all(self):
        """Pre-generate all sound effects as raw sample arrays."""
        self.sounds['collision'] = self._generate_collision()
        self.sounds['game_over'] = self._generate_game_over()
        self.sounds['game_start'] = self._generate_fanfare()
        return self.sounds

    def _generate_noise(self, duration):
        """Generate white noise."""
        num_samples = int(self.sample_rate * duration)
        return self.rng.uniform(-1, 1, num_samples)

    def _generate_sine(self, freq, duration, amplitude=1.0):
        """Generate a sine wave."""
        num_samples = int(self.sample_rate * duration)
        t = np.linspace(0, duration, num_samples, False)
        return amplitude * np.sin(2 * np.pi * freq * t)

    def _apply_envelope(self, samples, attack=0.01, decay=0.1, sustain=0.7, release=0.2):
        """Apply ADSR envelope to samples."""
        num_samples = len(samples)
        envelope = np.ones(num_samples)

        attack_samples = int(attack * self.sample_rate)
        decay_samples = int(decay * self.sample_rate)
        release_samples = int(release * self.sample_rate)
        sustain_samples = num_samples - attack_samples - decay_samples - release_samples

        if sustain_samples < 0:
            # Simplified envelope if duration is short
            envelope = np.linspace(1, 0, num_samples)
        else:
            envelope[:attack_samples] = np.linspace(0, 1, attack_samples)
            envelope[attack_samples:attack_samples + decay_samples] = np.linspace(1, sustain, decay_samples)
            envelope[attack_samples + decay_samples:attack_samples + decay_samples + sustain_samples] = sustain
            envelope[num_samples - release_samples:] = np.linspace(sustain, 0, release_samples)

        return samples * envelope

    def _lowpass_filter(self, samples, cutoff_ratio=0.1):
        """Simple lowpass filter using moving average."""
        window_size = max(1, int(1 / cutoff_ratio))
        kernel = np.ones(window_size) / window_size
        return np.convolve(samples, kernel, mode='same')

    def _generate_collision(self):
        """Generate a hull-impact thud with a short metallic ring."""
        duration = 0.4

        # Muffled underwater thump
        thump = self._generate_sine(70, duration, 0.8)
        thump *= np.exp(-np.linspace(0, 9, len(thump)))
        noise = self._lowpass_filter(self._generate_noise(duration), 0.05) * 0.6
        samples = thump + noise * np.exp(-np.linspace(0, 12, len(noise)))

        # Hull ring
        for i, freq in enumerate([520, 780, 1170]):
            tone = self._generate_sine(freq, duration, 0.25 / (i + 1))
            samples += tone * np.exp(-np.linspace(0, 14 + i * 4, len(tone)))

        return samples * 0.8

    def _generate_game_over(self):
        """Generate a slow descending tone sequence."""
        duration_per_note = 0.25
        notes = [392, 330, 262, 196]  # G4, E4, C4, G3

        all_samples = []
        for note in notes:
            samples = self._generate_sine(note, duration_per_note, 0.5)
            samples += self._generate_sine(note / 2, duration_per_note, 0.2)
            samples = self._apply_envelope(samples, attack=0.01, decay=0.05, sustain=0.6, release=0.08)
            all_samples.append(samples)

        return np.concatenate(all_samples) * 0.5

    def _generate_fanfare(self):
        """Generate game start fanfare."""
        duration_per_note = 0.12
        notes = [262, 330, 392, 523]  # C4, E4, G4, C5

        all_samples = []
        for note in notes:
            samples = self._generate_sine(note, duration_per_note, 0.5)
            samples += self._generate_sine(note * 2, duration_per_note, 0.2)
            samples = self._apply_envelope(samples, attack=0.01, decay=0.03, sustain=0.7, release=0.03)
            all_samples.append(samples)

        return np.concatenate(all_samples) * 0.5


def to_pcm16_stereo(samples):
    """Convert float samples in [-1, 1] to a stereo int16 array for the mixer."""
    samples = np.clip(samples, -1.0, 1.0)
    samples = (samples * 32767).astype(np.int16)
    return np.column_stack((samples, samples))


def load_sound_file(path):
    """Load a sound file, returning None (and logging) if it can't be used."""
    if not os.path.exists(path):
        logger.warning("Sound file not found: %s", path)
        return None
    try:
        return pygame.mixer.Sound(path)
    except pygame.error as exc:
        logger.warning("Could not load sound %s: %s", path, exc)
        return None


class SoundManager:
    """Plays sound cues for game events. Never raises on audio problems."""

    EVENT_CUES = {
        GameEvent.GAME_START: 'game_start',
        GameEvent.COLLISION: 'collision',
        GameEvent.GAME_OVER: 'game_over',
    }

    def __init__(self, enabled=SOUND_ENABLED, assets_dir=ASSETS_DIR):
        self.enabled = enabled
        self.sfx_volume = SFX_VOLUME
        self.assets_dir = assets_dir
        self.sounds = {}

        if self.enabled:
            self.enabled = self._init_mixer()
        if self.enabled:
            self._load_sounds()

    def _init_mixer(self):
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init(frequency=SAMPLE_RATE, channels=2)
        except pygame.error as exc:
            logger.warning("Audio unavailable, running silent: %s", exc)
            return False
        return True

    def _load_sounds(self):
        """Use wav files from the assets directory, generating any that are missing."""
        generator = SoundGenerator(sample_rate=pygame.mixer.get_init()[0])

        for name, filename in SOUND_FILES.items():
            path = os.path.join(self.assets_dir, filename)
            if not os.path.exists(path):
                logger.info("No %s, using generated %r cue", filename, name)
                continue
            sound = load_sound_file(path)
            if sound is not None:
                self.sounds[name] = sound

        for name, samples in generator.generate_all().items():
            if name in self.sounds:
                continue
            try:
                self.sounds[name] = pygame.sndarray.make_sound(to_pcm16_stereo(samples))
            except (pygame.error, ValueError) as exc:
                logger.warning("Could not build sound %r: %s", name, exc)

    def set_sfx_volume(self, volume):
        """Set sound effects volume (0.0 to 1.0)."""
        self.sfx_volume = max(0.0, min(1.0, volume))

    def play(self, sound_name, volume_multiplier=1.0):
        """Play a sound effect by name."""
        if not self.enabled:
            return

        sound = self.sounds.get(sound_name)
        if sound is None:
            logger.debug("No sound loaded for %r", sound_name)
            return

        try:
            sound.set_volume(self.sfx_volume * volume_multiplier)
            sound.play()
        except pygame.error as exc:
            logger.warning("Could not play %r: %s", sound_name, exc)

    def handle_event(self, event):
        """Play the cue mapped to a game event."""
        cue = self.EVENT_CUES.get(event)
        if cue:
            self.play(cue)
