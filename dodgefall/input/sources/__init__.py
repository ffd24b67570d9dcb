"""Input sources: abstract base, pygame window input, scripted playback."""
from dodgefall.input.sources.base import InputSource
from dodgefall.input.sources.pygame_source import PygameInputSource
from dodgefall.input.sources.scripted import ScriptedInputSource

__all__ = ['InputSource', 'PygameInputSource', 'ScriptedInputSource']
