"""
Output Module
=============

Serialized output boundary for encoded frame sets.
"""

from vtc.output.sink import OutputSink


__all__ = [
    "OutputSink",
]
