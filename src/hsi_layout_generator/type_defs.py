"""
Defines shared types for the layout generator.

Centralizes the layout kind enum and the generation record so the
controller, CLI, and tests agree on a single representation.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Literal

LayoutName = Literal[
    "horizontal-stripes",
    "vertical-stripes",
    "grid",
    "random",
    "image",
]


class LayoutKind(Enum):
    """Generators that can be replayed when the grid is resized."""

    NONE = "none"
    HORIZONTAL_STRIPES = "horizontal-stripes"
    VERTICAL_STRIPES = "vertical-stripes"
    GRID = "grid"
    RANDOM = "random"


@dataclass(frozen=True, slots=True)
class GenerationRecord:
    """Kind and parameters of the last replayable generation call."""

    layout_kind: LayoutKind = LayoutKind.NONE
    num_classes: int = 0
    size_parameter: int = 0
