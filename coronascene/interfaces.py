"""Abstract interfaces implemented by engine modules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import Counter
from typing import Dict, Generic, Set, Tuple, TypeVar

T = TypeVar("T")


class RuntimeModule(ABC):
    """A module driven by the engine's main loop."""

    @abstractmethod
    def initialize(self) -> None:
        """Prepare the module; raise on failure."""

    @abstractmethod
    def finalize(self) -> None:
        """Release what initialize acquired."""

    @abstractmethod
    def tick(self) -> None:
        """Run one cycle of the main loop."""


class GameLogic(RuntimeModule):
    """Game rules reacting to input.

    The input hooks keep track of the input state: which keys and buttons are
    held, how often each held key repeated, and the last deflection of each
    analog stick. Subclasses extend the hooks to add game behaviour.
    """

    def __init__(self) -> None:
        self.held_keys: Set[str] = set()
        self.key_repeats: Counter[str] = Counter()
        self.analog_sticks: Dict[int, Tuple[float, float]] = {}

    def _press(self, key: str) -> None:
        self.held_keys.add(key)

    def _release(self, key: str) -> None:
        self.held_keys.discard(key)
        self.key_repeats.pop(key, None)

    def _repeat(self, key: str) -> None:
        self.key_repeats[key] += 1

    def on_up_key_down(self) -> None:
        self._press("up")

    def on_up_key_up(self) -> None:
        self._release("up")

    def on_up_key(self) -> None:
        self._repeat("up")

    def on_down_key_down(self) -> None:
        self._press("down")

    def on_down_key_up(self) -> None:
        self._release("down")

    def on_down_key(self) -> None:
        self._repeat("down")

    def on_left_key_down(self) -> None:
        self._press("left")

    def on_left_key_up(self) -> None:
        self._release("left")

    def on_left_key(self) -> None:
        self._repeat("left")

    def on_right_key_down(self) -> None:
        self._press("right")

    def on_right_key_up(self) -> None:
        self._release("right")

    def on_right_key(self) -> None:
        self._repeat("right")

    def on_button1_down(self) -> None:
        self._press("button1")

    def on_button1_up(self) -> None:
        self._release("button1")

    def on_analog_stick(self, stick_id: int, delta_x: float, delta_y: float) -> None:
        self.analog_sticks[stick_id] = (delta_x, delta_y)


class DrawPass(ABC):
    """One rendering pass over a frame."""

    @abstractmethod
    def draw(self, frame) -> None:
        """Render frame."""


class Animatable(ABC, Generic[T]):
    """Something whose state advances from a parameter such as time."""

    @abstractmethod
    def update(self, param: T) -> None:
        """Advance to the state given by param."""