"""Key-event state machines: editing, prompts and incremental search."""

from .base_mode import KeyInput, Mode, ModeBus, ModeContext, ModeResult
from .edit_mode import EditMode
from .mode_manager import ModeManager
from .prompt_mode import PromptMode
from .save_as_mode import SaveAsMode
from .search_mode import SearchMode, SearchState

__all__ = [
    "EditMode",
    "KeyInput",
    "Mode",
    "ModeBus",
    "ModeContext",
    "ModeManager",
    "ModeResult",
    "PromptMode",
    "SaveAsMode",
    "SearchMode",
    "SearchState",
]
