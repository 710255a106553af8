"""Pydantic message modeling for ucgas.

This module provides the two UCGv2 message kinds and their shared base class.
"""

from __future__ import annotations

from .base import UcgMessage
from .frame import Frame
from .scripted import ScriptedMessage

__all__ = [
    "UcgMessage",
    "Frame",
    "ScriptedMessage",
]
