"""
Test Configuration
==================

Pytest fixtures and test configuration for vtc.
"""

import base64
from typing import Dict, List, Tuple

import cv2
import numpy as np
import pytest

from vtc.errors import DecodeError
from vtc.models.pixels import PixelBuffer


APC_PREFIX = "\x1b_G"
OSC_PREFIX = "\x1b]99;"
SUFFIX = "\x1b\\"

# 1x1 RGBA PNG
TINY_PNG_B64 = (
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mP8/5+hHgAHggJ/"
    "PchI7wAAAABJRU5ErkJggg=="
)


def _parse(frame: str, prefix: str, separator: str) -> Tuple[Dict[str, List[str]], str]:
    if not frame.startswith(prefix) or not frame.endswith(SUFFIX):
        raise AssertionError(f"Unexpected frame: {frame!r}")

    content = frame[len(prefix):-len(SUFFIX)]
    meta_part, _, payload = content.partition(";")

    meta: Dict[str, List[str]] = {}
    if meta_part:
        for entry in meta_part.split(separator):
            key, _, value = entry.partition("=")
            meta.setdefault(key, []).append(value)
    return meta, payload


def split_apc_frames(raw: str) -> List[str]:
    """Split concatenated APC frames into individual frames."""
    return [part + SUFFIX for part in raw.split(SUFFIX) if part]


def parse_apc_frame(frame: str) -> Tuple[Dict[str, str], str]:
    """Parse one APC frame into ({key: value}, payload)."""
    meta, payload = _parse(frame, APC_PREFIX, ",")
    return {key: values[-1] for key, values in meta.items()}, payload


def parse_osc_frame(frame: str) -> Tuple[Dict[str, List[str]], str]:
    """Parse one OSC 99 frame into ({key: [values]}, payload)."""
    return _parse(frame, OSC_PREFIX, ":")


class FakeDecoder:
    """ContainerDecoder double returning a fixed buffer or raising."""
    
    def __init__(self, result: PixelBuffer = None, error: Exception = None) -> None:
        self.result = result
        self.error = error
        self.calls = 0
    
    def decode(self, data: bytes) -> PixelBuffer:
        self.calls += 1
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def tiny_png() -> bytes:
    """Provide a valid 1x1 RGBA PNG."""
    return base64.b64decode(TINY_PNG_B64)


@pytest.fixture
def make_png():
    """Provide a factory encoding an (H, W, 4) RGBA uint8 array as PNG bytes."""
    def _make(rgba: np.ndarray) -> bytes:
        bgra = cv2.cvtColor(rgba, cv2.COLOR_RGBA2BGRA)
        ok, encoded = cv2.imencode(".png", bgra)
        assert ok
        return encoded.tobytes()
    return _make


@pytest.fixture
def sample_rgba() -> np.ndarray:
    """Provide a 2x3 (H x W) RGBA image with distinct pixels."""
    return np.array(
        [
            [[255, 0, 0, 255], [0, 255, 0, 128], [0, 0, 255, 0]],
            [[10, 20, 30, 40], [50, 60, 70, 80], [90, 100, 110, 120]],
        ],
        dtype=np.uint8,
    )


@pytest.fixture
def fake_decoder():
    """Provide a decoder double returning a 2x1 RGBA buffer."""
    return FakeDecoder(
        result=PixelBuffer(
            data=bytes([1, 2, 3, 4, 5, 6, 7, 8]),
            width=2,
            height=1,
            channels=4,
        )
    )


@pytest.fixture
def empty_decoder():
    """Provide a decoder double returning a 0x0 RGBA buffer."""
    return FakeDecoder(result=PixelBuffer(data=b"", width=0, height=0, channels=4))


@pytest.fixture
def failing_decoder():
    """Provide a decoder double that always fails."""
    return FakeDecoder(error=DecodeError("Input file is not a valid PNG: bad body"))


@pytest.fixture
def parse_apc():
    return parse_apc_frame


@pytest.fixture
def split_apcs():
    return split_apc_frames


@pytest.fixture
def parse_osc():
    return parse_osc_frame
