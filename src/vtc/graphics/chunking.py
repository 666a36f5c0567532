"""
Chunk Encoder
=============

Splits base64 text into fixed-size character slices.

Design Rules:
    - Splits strictly on character index (no realignment to multiples of 4)
    - Every slice but the last has exactly `max_chunk_chars` characters
    - Empty text yields zero chunks
    - Never inspects payload content
"""

from typing import Iterator, List

from vtc.models.options import DEFAULT_CHUNK_SIZE
from vtc.models.pixels import Chunk


def _check_size(max_chunk_chars: int) -> None:
    if max_chunk_chars < 1:
        raise ValueError(f"max_chunk_chars must be >= 1, got {max_chunk_chars}")


def chunk(text: str, max_chunk_chars: int = DEFAULT_CHUNK_SIZE) -> List[str]:
    """
    Split `text` into ordered slices of at most `max_chunk_chars`.
    
    Args:
        text: Base64 text
        max_chunk_chars: Slice length, must be >= 1
        
    Returns:
        List of slices, empty when `text` is empty
    """
    _check_size(max_chunk_chars)
    return [
        text[start:start + max_chunk_chars]
        for start in range(0, len(text), max_chunk_chars)
    ]


def iter_chunks(text: str, max_chunk_chars: int = DEFAULT_CHUNK_SIZE) -> Iterator[Chunk]:
    """
    Lazily yield Chunk records with first/last flags set.
    
    The total count is known up front from the text length, so the last
    flag is exact without buffering the slices.
    """
    _check_size(max_chunk_chars)
    total = -(-len(text) // max_chunk_chars)
    for index in range(total):
        start = index * max_chunk_chars
        yield Chunk(
            index=index,
            payload=text[start:start + max_chunk_chars],
            is_first=index == 0,
            is_last=index == total - 1,
        )
