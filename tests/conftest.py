"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from ucgas import Frame, ScriptedMessage


@pytest.fixture
def sample_frame() -> Frame:
    """RQRY frame from 1F/7 to 03/4 with a two-byte payload."""
    return Frame(
        target=3,
        subtarget=4,
        source=0x1F,
        subsource=7,
        op=1,
        length=2,
        data=b"\x01\x02",
    )


@pytest.fixture
def sample_frame_bytes() -> bytes:
    """Wire encoding of sample_frame."""
    return b"\x1c\xff\x08\x02\x01\x02"


@pytest.fixture
def sample_scripted(sample_frame: Frame) -> ScriptedMessage:
    """sample_frame scheduled 250 units after the reference instant."""
    return ScriptedMessage(frame=sample_frame, is_relative=True, timestamp=250)
