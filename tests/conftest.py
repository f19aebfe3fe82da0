"""Pytest configuration for DIS codec tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from discodec.codec import PduCodec
from discodec.config.model import CodecConfig

FIXED_TIMESTAMP = 0x12345678


@pytest.fixture
def codec() -> PduCodec:
    return PduCodec(CodecConfig(exercise_id=3))


@pytest.fixture
def restore_root_logging() -> Iterator[None]:
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    try:
        yield
    finally:
        for handler in list(root.handlers):
            if handler not in handlers:
                root.removeHandler(handler)
                handler.close()
        for handler in handlers:
            if handler not in root.handlers:
                root.addHandler(handler)
        root.setLevel(level)
