"""Declarative keymap registry.

Default bindings live in :mod:`editor_core.keymaps.defaults`, which is imported
explicitly because it pulls in the action handlers.
"""

from .models import ActionRef, Binding, KeyStroke
from .registry import KeymapConflictError, KeymapRegistry, RegistryStats, ResolutionMatch

__all__ = [
    "ActionRef",
    "Binding",
    "KeyStroke",
    "KeymapConflictError",
    "KeymapRegistry",
    "RegistryStats",
    "ResolutionMatch",
]
