"""
Query Encoder
=============

Builds the graphics support query frame (`a=q`).

A terminal that implements the protocol answers with `OK` (or an error)
for the queried image id; the frame itself carries no payload.
"""

from typing import Optional

from vtc.models.options import DEFAULT_QUERY_IMAGE_ID
from vtc.vt.framing import apc


def build_query(
    image_id: Optional[int] = None,
    quiet: Optional[int] = None,
    default_image_id: int = DEFAULT_QUERY_IMAGE_ID,
) -> str:
    """
    Build a single query frame.
    
    Args:
        image_id: Image id to query (default_image_id when None)
        quiet: Optional quiet level 0, 1 or 2
        default_image_id: Id used when none is given
        
    Returns:
        `ESC _G a=q,i=<id>[,q=<quiet>]; ESC \\`
    """
    meta = ["a=q", f"i={image_id if image_id is not None else default_image_id}"]
    if quiet is not None:
        meta.append(f"q={quiet}")
    return apc(meta, "")
