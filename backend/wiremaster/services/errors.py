"""
Wire Master - Generation Failures

Structured failures raised inside a single generation attempt. Each one names
the invariant that broke and carries the observed vs. expected values.
"""

from typing import Any, Optional


class GenerationFailure(Exception):
    """Base class for recoverable per-attempt failures."""

    invariant = "generation"

    def __init__(self, message: str, observed: Any = None, expected: Any = None):
        super().__init__(message)
        self.message = message
        self.observed = observed
        self.expected = expected

    def to_dict(self) -> dict:
        return {
            "invariant": self.invariant,
            "message": self.message,
            "observed": self.observed,
            "expected": self.expected,
        }

    def __str__(self) -> str:
        return f"[{self.invariant}] {self.message}"


class IncompleteCoverage(GenerationFailure):
    invariant = "coverage"


class PartitionInfeasible(GenerationFailure):
    invariant = "partition"


class DuplicateColor(GenerationFailure):
    invariant = "color_uniqueness"


class DuplicateEndpoint(GenerationFailure):
    invariant = "endpoint_disjointness"


class WireTooShort(GenerationFailure):
    invariant = "min_wire_size"


class OutOfBounds(GenerationFailure):
    invariant = "bounds"


class BrokenPath(GenerationFailure):
    invariant = "path_continuity"


class Unsolvable(GenerationFailure):
    invariant = "solvability"

    def __init__(self, message: str, observed: Any = None, expected: Any = None, steps: Optional[int] = None):
        super().__init__(message, observed, expected)
        self.steps = steps
