"""Public package exports for the HSI layout generator."""

from __future__ import annotations

from .layout import LayoutController, LayoutGrid
from .type_defs import GenerationRecord, LayoutKind

__all__ = ["GenerationRecord", "LayoutController", "LayoutGrid", "LayoutKind"]
