"""Audio source components and the manager that plays them through a back end."""

from __future__ import annotations

import abc
import logging

from bravoengine.components import Component, GameObject

_log = logging.getLogger(__name__)


class AudioFacade(abc.ABC):
    """Interface to an audio library that loads and plays sounds and music."""

    @abc.abstractmethod
    def load_sound(self, path: str) -> None:
        """Load a sound effect into memory."""

    @abc.abstractmethod
    def load_music(self, path: str) -> None:
        """Load the music track into memory."""

    @abc.abstractmethod
    def unload_all(self) -> None:
        """Free every loaded sound and the music."""

    @abc.abstractmethod
    def audio_is_loaded(self, path: str) -> bool:
        """Return True if the sound effect is loaded."""

    @abc.abstractmethod
    def music_is_loaded(self) -> bool:
        """Return True if a music track is loaded."""

    @abc.abstractmethod
    def play_sound(self, path: str, looping: bool, volume: int, direction: int) -> None:
        """Play a loaded sound effect."""

    @abc.abstractmethod
    def play_music(self, volume: int) -> None:
        """Play the loaded music track."""

    @abc.abstractmethod
    def pause_music(self) -> None:
        """Pause the music."""

    @abc.abstractmethod
    def resume_music(self) -> None:
        """Resume paused music, or start it when it is not playing."""

    @abc.abstractmethod
    def stop_music(self) -> None:
        """Stop the music."""

    @abc.abstractmethod
    def is_playing(self, path: str) -> bool:
        """Return True if the sound effect is playing on some channel."""

    @abc.abstractmethod
    def is_music_playing(self) -> bool:
        """Return True if music is playing."""


class AudioSource(Component):
    """A sound effect or music track attached to a game object."""

    DEFAULT_VOLUME = 50
    MAX_VOLUME = 100
    MIN_X_DIRECTION = -90
    MAX_X_DIRECTION = 90

    def __init__(self, path: str, is_music: bool = False, tag: str = "defaultAudioSource") -> None:
        super().__init__(tag)
        self._file_name = path
        self._is_music = is_music
        self.play_on_wake = False
        self.looping = False
        self._volume = self.DEFAULT_VOLUME
        self._x_direction = 0

    @property
    def file_name(self) -> str:
        """Path of the audio file."""
        return self._file_name

    @property
    def is_music(self) -> bool:
        """Whether this source is the music track rather than a sound effect."""
        return self._is_music

    @property
    def volume(self) -> int:
        """Volume from 0 to MAX_VOLUME; larger values are clamped."""
        return self._volume

    @volume.setter
    def volume(self, value: int) -> None:
        if value < 0:
            raise ValueError("volume cannot be negative")
        if value > self.MAX_VOLUME:
            _log.warning(
                "Volume cannot be greater than %d. Setting to %d instead", self.MAX_VOLUME, self.MAX_VOLUME
            )
            value = self.MAX_VOLUME
        self._volume = int(value)

    @property
    def x_direction(self) -> int:
        """Horizontal direction of the sound, clamped to the allowed range."""
        return self._x_direction

    @x_direction.setter
    def x_direction(self, value: int) -> None:
        if value < self.MIN_X_DIRECTION:
            _log.warning(
                "X coordinate must be greater than or equal to %d. Setting to %d instead",
                self.MIN_X_DIRECTION,
                self.MIN_X_DIRECTION,
            )
            value = self.MIN_X_DIRECTION
        elif value > self.MAX_X_DIRECTION:
            _log.warning(
                "X coordinate must be less than or equal to %d. Setting to %d instead",
                self.MAX_X_DIRECTION,
                self.MAX_X_DIRECTION,
            )
            value = self.MAX_X_DIRECTION
        self._x_direction = int(value)

    def set_x_direction_between(self, listener_x: int, source_x: int) -> None:
        """Set the direction from a listener's x coordinate to the source's."""
        self.x_direction = source_x - listener_x

    def clone(self) -> AudioSource:
        """Return an independent copy of this source."""
        duplicate = super().clone()
        assert isinstance(duplicate, AudioSource)
        return duplicate


class AudioManager:
    """Plays audio sources and tracks the game objects that carry them."""

    def __init__(self, facade: AudioFacade) -> None:
        self._facade = facade
        self._objects: list[GameObject] = []

    @property
    def facade(self) -> AudioFacade:
        """The audio back end in use."""
        return self._facade

    @property
    def objects(self) -> list[GameObject]:
        """Game objects registered as carrying audio sources."""
        return list(self._objects)

    def play(self, source: AudioSource) -> None:
        """Load the source if needed and play it."""
        if source.is_music:
            if not self._facade.music_is_loaded():
                self._facade.load_music(source.file_name)
            self._facade.play_music(source.volume)
        else:
            if not self._facade.audio_is_loaded(source.file_name):
                self._facade.load_sound(source.file_name)
            self._facade.play_sound(source.file_name, source.looping, source.volume, source.x_direction)

    def pause(self, source: AudioSource) -> None:
        """Pause music; raises ValueError for sound effects."""
        if not source.is_music:
            raise ValueError("Only music sources can be paused.")
        self._facade.pause_music()

    def resume(self, source: AudioSource) -> None:
        """Resume music; raises ValueError for sound effects."""
        if not source.is_music:
            raise ValueError("Only music sources can be resumed.")
        self._facade.resume_music()

    def stop(self, source: AudioSource) -> None:
        """Stop music; raises ValueError for sound effects."""
        if not source.is_music:
            raise ValueError("Only music sources can be stopped.")
        self._facade.stop_music()

    def wake(self) -> None:
        """Play every registered source that is set to play on wake."""
        for game_object in self._objects:
            for source in game_object.get_components(AudioSource):
                if source.play_on_wake:
                    self.play(source)

    def load_sound(self, source: AudioSource) -> None:
        """Load the source's file into memory."""
        if source.is_music:
            self._facade.load_music(source.file_name)
        else:
            self._facade.load_sound(source.file_name)

    def clear_sounds(self) -> None:
        """Free every loaded sound and the music."""
        self._facade.unload_all()

    def add_object(self, game_object: GameObject) -> None:
        """Register a game object once; adding it again does nothing."""
        if not any(obj is game_object for obj in self._objects):
            self._objects.append(game_object)

    def remove_object(self, game_object: GameObject) -> None:
        """Unregister a game object; unknown objects are ignored."""
        self._objects = [obj for obj in self._objects if obj is not game_object]

    def clear_objects(self) -> None:
        """Unregister every game object."""
        self._objects.clear()