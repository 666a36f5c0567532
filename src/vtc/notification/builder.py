"""
Notification Builder
====================

Builds OSC 99 desktop notification frames.

Message Layout:
    - no message parts      -> one title frame, payload "Hello world"
    - one part              -> one title frame
    - two or more parts     -> title frame (d=0) + body frame (d=1)
    - explicit payload type -> one frame, parts joined by spaces

Key Encoding:
    f (app), n (icon name), s (sound) and t (type) carry free text and are
    sent base64-encoded. n and t may repeat.
"""

import base64
import logging
from typing import Any, Dict, List, Sequence, Union

from vtc.models.options import NotificationOptions
from vtc.vt.framing import osc


logger = logging.getLogger(__name__)


DEFAULT_TITLE = "Hello world"

# Emission order: (protocol key, NotificationOptions field)
METADATA_KEYS = (
    ("a", "actions"),
    ("c", "close"),
    ("d", "complete"),
    ("e", "base64"),
    ("f", "app"),
    ("g", "icon_cache"),
    ("i", "identifier"),
    ("n", "icon_names"),
    ("o", "occasion"),
    ("p", "payload_type"),
    ("s", "sound"),
    ("t", "types"),
    ("u", "urgency"),
    ("w", "expire_ms"),
)

BASE64_KEYS = frozenset({"f", "n", "s", "t"})

MetaValue = Union[str, int, List[str], None]


def _b64(value: str) -> str:
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


def _add_meta(entries: List[str], key: str, value: MetaValue) -> None:
    if value is None:
        return
    if isinstance(value, list):
        for item in value:
            _add_meta(entries, key, item)
        return
    raw = str(value)
    entries.append(f"{key}={_b64(raw) if key in BASE64_KEYS else raw}")


def build_metadata(options: NotificationOptions, **overrides: Any) -> List[str]:
    """
    Build ordered OSC 99 metadata tokens.
    
    Args:
        options: Notification options
        **overrides: Field values replacing the options' values
        
    Returns:
        `key=value` tokens, unset keys omitted
    """
    values: Dict[str, Any] = options.model_dump()
    values.update(overrides)

    entries: List[str] = []
    for key, field in METADATA_KEYS:
        _add_meta(entries, key, values.get(field))
    return entries


def build_notification(
    message_parts: Sequence[str],
    options: NotificationOptions,
) -> List[str]:
    """
    Build the OSC 99 frames for a notification.
    
    Args:
        message_parts: Title followed by body words; empty strings dropped
        options: Notification options
        
    Returns:
        One or two frames, in emission order
    """
    parts = [part for part in message_parts if part]

    if options.payload_type:
        effective_base64 = options.base64
        if options.payload_type == "icon" and effective_base64 is None:
            effective_base64 = 1
        meta = build_metadata(options, base64=effective_base64)
        return [osc(meta, " ".join(parts))]

    if not parts:
        return [osc(build_metadata(options, payload_type="title"), DEFAULT_TITLE)]

    if len(parts) == 1:
        return [osc(build_metadata(options, payload_type="title"), parts[0])]

    title, body = parts[0], " ".join(parts[1:])
    title_complete = options.complete if options.complete is not None else 0
    body_complete = options.complete if options.complete is not None else 1

    logger.debug(f"Splitting notification into title and {len(parts) - 1} body part(s)")

    return [
        osc(build_metadata(options, payload_type="title", complete=title_complete), title),
        osc(build_metadata(options, payload_type="body", complete=body_complete), body),
    ]
