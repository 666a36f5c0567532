"""
Notification Module
===================

OSC 99 desktop notification frames.
"""

from vtc.notification.builder import build_metadata, build_notification


__all__ = [
    "build_metadata",
    "build_notification",
]
