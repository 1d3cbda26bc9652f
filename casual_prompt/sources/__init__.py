from __future__ import annotations

from .scripted import ScriptedLineSource
from .stdio import StdioLineSource

__all__ = [
    "ScriptedLineSource",
    "StdioLineSource",
]
