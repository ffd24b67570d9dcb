"""Host-facing interface for Dodgefall game modes.

A game mode declares its metadata and extra CLI arguments as class
attributes; main.py builds the argparse parser and the banner from them,
then drives the instance through handle_input/update/render each frame.
"""
from abc import ABC, abstractmethod
from typing import Any, Dict, List

import pygame

from dodgefall.game_state import GameState
from dodgefall.input.input_event import InputEvent


class BaseGame(ABC):
    """A game the host loop can run.

    ARGUMENTS entries are dicts of argparse keywords plus 'name'
    (``type``, ``default``, ``help``, optional ``choices``/``action``).
    """

    NAME: str = "Unnamed Game"
    DESCRIPTION: str = ""
    VERSION: str = "1.0.0"

    ARGUMENTS: List[Dict[str, Any]] = []

    # Shared by every mode; a mode's own ARGUMENTS entry of the same name wins
    _BASE_ARGUMENTS: List[Dict[str, Any]] = [
        {
            'name': '--profile',
            'type': str,
            'default': None,
            'help': 'Tuning profile name or path to a profile YAML file'
        },
        {
            'name': '--seed',
            'type': int,
            'default': None,
            'help': 'Random seed for reproducible obstacle streams'
        },
    ]

    @classmethod
    def get_arguments(cls) -> List[Dict[str, Any]]:
        """Mode arguments followed by base arguments, deduplicated by name."""
        by_name: Dict[str, Dict[str, Any]] = {}
        for arg in list(cls.ARGUMENTS) + list(cls._BASE_ARGUMENTS):
            by_name.setdefault(arg['name'], arg)
        return list(by_name.values())

    @classmethod
    def get_info(cls) -> Dict[str, Any]:
        return {
            'name': cls.NAME,
            'description': cls.DESCRIPTION,
            'version': cls.VERSION,
            'arguments': cls.get_arguments(),
        }

    @property
    @abstractmethod
    def state(self) -> GameState:
        """IDLE, PLAYING or GAME_OVER."""

    @abstractmethod
    def get_score(self) -> int:
        """Score to report when the host exits."""

    @abstractmethod
    def handle_input(self, events: List[InputEvent]) -> None:
        """Consume this frame's input events."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance by ``dt`` seconds."""

    @abstractmethod
    def render(self, screen: pygame.Surface) -> None:
        """Draw the current frame onto ``screen``."""

    @abstractmethod
    def get_available_actions(self) -> List[Dict[str, Any]]:
        """Commands offered in the current state, as dicts with id/label/style."""

    @abstractmethod
    def execute_action(self, action_id: str) -> bool:
        """Run a command from get_available_actions(); False if unknown."""
