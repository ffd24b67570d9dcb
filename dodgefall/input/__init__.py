"""
Input handling for Dodgefall.

Sources produce InputEvents, the InputManager collects them, and
InputState folds them into the movement intent the simulation reads.
"""
from dodgefall.input.input_event import Direction, InputEvent, InputEventType
from dodgefall.input.input_manager import InputManager
from dodgefall.input.input_state import InputState

__all__ = ['Direction', 'InputEvent', 'InputEventType', 'InputManager', 'InputState']
