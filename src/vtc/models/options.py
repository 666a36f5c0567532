"""
Option Schemas
==============

Pydantic models for the flat option structs consumed by the encoders.

The CLI (or any other front end) resolves its raw arguments into one of
these models. The encoders never parse raw arguments themselves, and any
invalid value is rejected here, before a single byte is produced.

Example:
    from vtc.models.options import TransmitOptions
    
    options = TransmitOptions(format="rgb", width=2, height=1, no_move=True)
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from vtc.models.wire import WireFormat


DEFAULT_CHUNK_SIZE = 4096
DEFAULT_QUERY_IMAGE_ID = 31


class TransmitOptions(BaseModel):
    """
    Options for an image transmit-and-display command.
    
    Every display field is optional; unset fields are simply not emitted.
    
    Attributes:
        format: Pixel wire format to send
        chunk_size: Max base64 characters per frame
        width, height: Pixel size (mandatory for raw pixel input)
        columns, rows: Display size in terminal cells
        image_id, placement_id: Terminal-side identifiers
        quiet: Response suppression level (1 = OK, 2 = all)
        no_move: Keep the cursor in place after display
        source_x, source_y, source_width, source_height: Source rectangle
        offset_x, offset_y: Pixel offset within the first cell
    """
    
    format: WireFormat = Field(default=WireFormat.PNG, description="Pixel wire format")
    chunk_size: int = Field(
        default=DEFAULT_CHUNK_SIZE,
        gt=0,
        description="Max base64 characters per frame",
    )
    
    width: Optional[int] = Field(default=None, gt=0, description="Image width in pixels")
    height: Optional[int] = Field(default=None, gt=0, description="Image height in pixels")
    columns: Optional[int] = Field(default=None, gt=0, description="Display width in columns")
    rows: Optional[int] = Field(default=None, gt=0, description="Display height in rows")
    image_id: Optional[int] = Field(default=None, gt=0, description="Image ID")
    placement_id: Optional[int] = Field(default=None, gt=0, description="Placement ID")
    quiet: Optional[int] = Field(default=None, ge=0, le=2, description="Quiet level")
    no_move: bool = Field(default=False, description="Do not move the cursor")
    
    source_x: Optional[int] = Field(default=None, ge=0, description="Source rectangle left")
    source_y: Optional[int] = Field(default=None, ge=0, description="Source rectangle top")
    source_width: Optional[int] = Field(default=None, gt=0, description="Source rectangle width")
    source_height: Optional[int] = Field(default=None, gt=0, description="Source rectangle height")
    
    offset_x: Optional[int] = Field(default=None, ge=0, description="Sub-cell X offset")
    offset_y: Optional[int] = Field(default=None, ge=0, description="Sub-cell Y offset")
    
    class Config:
        """Pydantic model configuration."""
        
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "format": "png",
                "chunk_size": 4096,
                "columns": 40,
                "rows": 20,
                "image_id": 5,
                "quiet": 2,
                "no_move": True,
            }
        }


class QueryOptions(BaseModel):
    """Options for a graphics support query."""
    
    image_id: Optional[int] = Field(default=None, gt=0, description="Image ID")
    quiet: Optional[int] = Field(default=None, ge=0, le=2, description="Quiet level")


class NotificationOptions(BaseModel):
    """
    OSC 99 notification metadata.
    
    Field names are descriptive; the single-letter protocol key is noted
    next to each one.
    """
    
    actions: Optional[str] = Field(default=None, description="a: actions on activation")
    close: Optional[int] = Field(default=None, ge=0, le=1, description="c: report close")
    complete: Optional[int] = Field(default=None, ge=0, le=1, description="d: chunk done")
    base64: Optional[int] = Field(default=None, ge=0, le=1, description="e: payload is base64")
    app: Optional[str] = Field(default=None, description="f: application name")
    icon_cache: Optional[str] = Field(default=None, description="g: icon cache id")
    identifier: Optional[str] = Field(default=None, description="i: notification id")
    icon_names: List[str] = Field(default_factory=list, description="n: icon names")
    occasion: Optional[str] = Field(default=None, description="o: occasion")
    payload_type: Optional[str] = Field(default=None, description="p: payload type")
    sound: Optional[str] = Field(default=None, description="s: sound name")
    types: List[str] = Field(default_factory=list, description="t: notification types")
    urgency: Optional[int] = Field(default=None, ge=0, le=2, description="u: urgency")
    expire_ms: Optional[int] = Field(default=None, description="w: auto-expire ms")
