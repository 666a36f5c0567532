"""
Escape Framing
==============

The two escape-sequence envelopes used by the encoders.

    OSC 99 (notifications):  ESC ] 99 ; <k=v:k=v> ; <payload> ESC \\
    APC G  (graphics):       ESC _ G <k=v,k=v> ; <payload> ESC \\

Design Rules:
    - Pure functions, no validation or escaping of the payload
    - Callers guarantee the payload is already safe text (e.g. base64)
    - Empty metadata leaves the separators in place
"""

from typing import Sequence


ESC = "\x1b"
ST = ESC + "\\"
OSC_PREFIX = ESC + "]99;"
APC_PREFIX = ESC + "_G"


def osc(metadata: Sequence[str], payload: str) -> str:
    """Wrap colon-joined metadata and a payload in an OSC 99 frame."""
    return f"{OSC_PREFIX}{':'.join(metadata)};{payload}{ST}"


def apc(metadata: Sequence[str], payload: str) -> str:
    """Wrap comma-joined metadata and a payload in a graphics APC frame."""
    return f"{APC_PREFIX}{','.join(metadata)};{payload}{ST}"
