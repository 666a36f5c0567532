"""
Transmission Pipeline
=====================

Turns image file bytes into the complete frame set for a transmit-and-display
command.

Pipeline:
    1. Resolve the wire format and the bytes to send (container.py)
    2. Base64-encode the whole buffer at once
    3. Split the base64 text into chunks (chunking.py)
    4. First chunk: full metadata from the FIRST_CHUNK_KEYS table
    5. Every chunk: exactly one continuation key, m=1 or m=0 (last)
    6. Frame each chunk as APC and concatenate in order

Design Rules:
    - No output until every validation step has succeeded
    - One aggregate write per transmission, no per-chunk flushing
    - An empty payload still produces one terminating frame (m=0)
    - The pipeline keeps no per-call state; one instance may serve many calls
"""

import base64
import logging
from typing import Any, Dict, Iterator, List, Optional, Tuple

from vtc.graphics.chunking import iter_chunks
from vtc.graphics.container import ContainerDecoder, ResolvedPayload, resolve_payload
from vtc.models.options import TransmitOptions
from vtc.models.pixels import Chunk
from vtc.output.sink import OutputSink
from vtc.vt.framing import apc


logger = logging.getLogger(__name__)


TRANSMIT_ACTION = "a=T"

# Optional first-chunk fields in emission order: (field, protocol key).
# `width` and `height` come from the resolved payload, the rest from options.
FIRST_CHUNK_KEYS: Tuple[Tuple[str, str], ...] = (
    ("width", "s"),
    ("height", "v"),
    ("columns", "c"),
    ("rows", "r"),
    ("image_id", "i"),
    ("placement_id", "p"),
    ("quiet", "q"),
    ("no_move", "C"),
    ("source_x", "x"),
    ("source_y", "y"),
    ("source_width", "w"),
    ("source_height", "h"),
    ("offset_x", "X"),
    ("offset_y", "Y"),
)


def _format_value(value: Any) -> Optional[str]:
    """Render a metadata value, or None when the key must be omitted."""
    if value is None or value is False:
        return None
    if value is True:
        return "1"
    return str(value)


def first_chunk_metadata(options: TransmitOptions, resolved: ResolvedPayload) -> List[str]:
    """
    Build the display metadata carried by the first chunk only.

    Args:
        options: Validated transmit options
        resolved: Resolved payload (supplies width/height)

    Returns:
        Ordered `key=value` tokens, without the continuation key
    """
    values: Dict[str, Any] = options.model_dump()
    values["width"] = resolved.width
    values["height"] = resolved.height

    meta = [TRANSMIT_ACTION, f"f={options.format.code}"]
    for field, key in FIRST_CHUNK_KEYS:
        rendered = _format_value(values.get(field))
        if rendered is not None:
            meta.append(f"{key}={rendered}")
    return meta


def chunk_metadata(chunk: Chunk, first_meta: List[str]) -> List[str]:
    """Metadata for one chunk: display keys on the first, then `m`."""
    meta = list(first_meta) if chunk.is_first else []
    meta.append(f"m={0 if chunk.is_last else 1}")
    return meta


class TransmissionPipeline:
    """
    Image transmission encoder.

    Attributes:
        decoder: PNG decoding backend used for rgb/rgba conversion
                 (None selects the OpenCV decoder)

    Example:
        pipeline = TransmissionPipeline()
        options = TransmitOptions(format="rgb", width=2, height=1)

        text = pipeline.encode(b"\\xff\\x00\\x00\\x00\\xff\\x00", options)
        pipeline.transmit(data, options, OutputSink())
    """

    def __init__(self, decoder: Optional[ContainerDecoder] = None) -> None:
        self.decoder = decoder

    def resolve(self, data: bytes, options: TransmitOptions) -> ResolvedPayload:
        """Resolve the bytes to send; raises a TransmissionError on failure."""
        return resolve_payload(
            data,
            options.format,
            width=options.width,
            height=options.height,
            decoder=self.decoder,
        )

    def iter_frames(self, data: bytes, options: TransmitOptions) -> Iterator[str]:
        """
        Validate eagerly, then return a lazy iterator over the frames.

        All TransmissionErrors are raised by this call itself, before the
        first frame can be consumed.
        """
        resolved = self.resolve(data, options)
        encoded = base64.standard_b64encode(resolved.data).decode("ascii")
        first_meta = first_chunk_metadata(options, resolved)

        logger.debug(
            f"Transmitting {len(resolved.data)} bytes as {options.format.value} "
            f"(f={options.format.code}), {len(encoded)} base64 chars, "
            f"chunk_size={options.chunk_size}"
        )

        return self._frames(encoded, options.chunk_size, first_meta)

    def _frames(self, encoded: str, chunk_size: int, first_meta: List[str]) -> Iterator[str]:
        emitted = 0
        for chunk in iter_chunks(encoded, chunk_size):
            emitted += 1
            yield apc(chunk_metadata(chunk, first_meta), chunk.payload)

        if emitted == 0:
            # Empty payload: still terminate the transmission.
            terminator = Chunk(index=0, payload="", is_first=True, is_last=True)
            yield apc(chunk_metadata(terminator, first_meta), "")

    def encode(self, data: bytes, options: TransmitOptions) -> str:
        """Return the concatenated frame set for one transmission."""
        return "".join(self.iter_frames(data, options))

    def transmit(self, data: bytes, options: TransmitOptions, sink: OutputSink) -> int:
        """
        Encode and write the frame set with a single sink write.

        Returns:
            Number of characters written
        """
        output = self.encode(data, options)
        sink.write(output)
        return len(output)
