"""
Evaluation results and error kinds for grunge.

Noise modules report parameter problems as data: `generate` returns a
NoiseResult holding either a value or a NoiseErrorKind, and wrappers pass
error results through untouched. NoiseGenerationError is only raised when a
caller explicitly unwraps a failed result.
"""

import enum
from typing import Callable, Optional


class NoiseErrorKind(enum.Enum):
    """Reasons a noise module can refuse to produce a value."""

    TOO_FEW_OCTAVES = "The number of octaves must be two or greater."
    TOO_MANY_OCTAVES = "The number of octaves must be less than 30."

    @property
    def message(self) -> str:
        return self.value


class NoiseGenerationError(ValueError):
    """Raised when a failed NoiseResult is unwrapped."""

    def __init__(self, kind: NoiseErrorKind):
        super().__init__(kind.message)
        self.kind = kind


class NoiseResult:
    """
    Outcome of a single noise evaluation: a float value or an error kind.

    Instances are immutable. Use `ok` / `err` to build them.
    """

    __slots__ = ("_value", "_error")

    def __init__(self, value: Optional[float] = None, error: Optional[NoiseErrorKind] = None):
        if (value is None) == (error is None):
            raise ValueError("NoiseResult needs exactly one of value or error")
        object.__setattr__(self, "_value", value)
        object.__setattr__(self, "_error", error)

    def __setattr__(self, name, value):
        raise AttributeError("NoiseResult is immutable")

    @classmethod
    def ok(cls, value: float) -> "NoiseResult":
        return cls(value=value)

    @classmethod
    def err(cls, kind: NoiseErrorKind) -> "NoiseResult":
        return cls(error=kind)

    @property
    def value(self) -> Optional[float]:
        return self._value

    @property
    def error(self) -> Optional[NoiseErrorKind]:
        return self._error

    def is_ok(self) -> bool:
        return self._error is None

    def is_err(self) -> bool:
        return self._error is not None

    def unwrap(self) -> float:
        """Return the value, raising NoiseGenerationError on an error result."""
        if self._error is not None:
            raise NoiseGenerationError(self._error)
        return self._value

    def map(self, fn: Callable[[float], float]) -> "NoiseResult":
        """Apply `fn` to a success value; error results are returned as-is."""
        if self._error is not None:
            return self
        return NoiseResult.ok(fn(self._value))

    def __eq__(self, other):
        if not isinstance(other, NoiseResult):
            return NotImplemented
        return self._value == other._value and self._error is other._error

    def __hash__(self):
        return hash((self._value, self._error))

    def __repr__(self):
        if self._error is not None:
            return f"NoiseResult.err({self._error})"
        return f"NoiseResult.ok({self._value!r})"
