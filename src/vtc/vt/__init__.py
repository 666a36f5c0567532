"""
VT Module
=========

Escape-sequence framing primitives shared by the graphics and
notification encoders.
"""

from vtc.vt.framing import APC_PREFIX, OSC_PREFIX, ST, apc, osc


__all__ = [
    "apc",
    "osc",
    "APC_PREFIX",
    "OSC_PREFIX",
    "ST",
]
