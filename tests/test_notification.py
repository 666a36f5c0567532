"""
Notification Builder Tests
==========================
"""

import base64

import pytest

from vtc.models import NotificationOptions
from vtc.notification import build_metadata, build_notification


def b64(value: str) -> str:
    return base64.b64encode(value.encode("utf-8")).decode("ascii")


class TestMessageLayout:
    """Tests for title/body splitting."""
    
    def test_default_title_when_no_message(self, parse_osc):
        frames = build_notification([], NotificationOptions())
        
        assert len(frames) == 1
        meta, payload = parse_osc(frames[0])
        assert payload == "Hello world"
        assert meta["p"] == ["title"]
    
    def test_single_part_is_title(self, parse_osc):
        (frame,) = build_notification(["Hello"], NotificationOptions())
        meta, payload = parse_osc(frame)
        
        assert payload == "Hello"
        assert meta["p"] == ["title"]
    
    def test_empty_parts_dropped(self, parse_osc):
        (frame,) = build_notification(["", "Hello", ""], NotificationOptions())
        assert parse_osc(frame)[1] == "Hello"
    
    def test_title_and_body_with_default_completion(self, parse_osc):
        frames = build_notification(["Title", "Body", "More"], NotificationOptions())
        
        assert len(frames) == 2
        
        title_meta, title = parse_osc(frames[0])
        assert title == "Title"
        assert title_meta["p"] == ["title"]
        assert title_meta["d"] == ["0"]
        
        body_meta, body = parse_osc(frames[1])
        assert body == "Body More"
        assert body_meta["p"] == ["body"]
        assert body_meta["d"] == ["1"]
    
    def test_explicit_completion_applies_to_both(self, parse_osc):
        frames = build_notification(["Title", "Body"], NotificationOptions(complete=1))
        assert [parse_osc(f)[0]["d"] for f in frames] == [["1"], ["1"]]
    
    def test_icon_payload_defaults_to_base64(self, parse_osc):
        (frame,) = build_notification(["ICONDATA"], NotificationOptions(payload_type="icon"))
        meta, payload = parse_osc(frame)
        
        assert payload == "ICONDATA"
        assert meta["p"] == ["icon"]
        assert meta["e"] == ["1"]
    
    def test_icon_payload_respects_explicit_base64(self, parse_osc):
        (frame,) = build_notification(
            ["ICONDATA"], NotificationOptions(payload_type="icon", base64=0)
        )
        assert parse_osc(frame)[0]["e"] == ["0"]
    
    def test_explicit_payload_type_joins_parts(self, parse_osc):
        (frame,) = build_notification(["a", "b"], NotificationOptions(payload_type="body"))
        meta, payload = parse_osc(frame)
        
        assert payload == "a b"
        assert "e" not in meta


class TestMetadata:
    """Tests for key encoding."""
    
    @pytest.mark.parametrize(
        "kwargs, key, value",
        [
            ({"actions": "open"}, "a", "open"),
            ({"close": 1}, "c", "1"),
            ({"complete": 1}, "d", "1"),
            ({"base64": 1}, "e", "1"),
            ({"app": "MyApp"}, "f", b64("MyApp")),
            ({"icon_cache": "cache-id"}, "g", "cache-id"),
            ({"identifier": "id-1"}, "i", "id-1"),
            ({"icon_names": ["bell"]}, "n", b64("bell")),
            ({"occasion": "launch"}, "o", "launch"),
            ({"payload_type": "body"}, "p", "body"),
            ({"sound": "ding"}, "s", b64("ding")),
            ({"types": ["info"]}, "t", b64("info")),
            ({"urgency": 2}, "u", "2"),
            ({"expire_ms": 5000}, "w", "5000"),
        ],
    )
    def test_each_key(self, parse_osc, kwargs, key, value):
        (frame,) = build_notification(["Title"], NotificationOptions(**kwargs))
        assert value in parse_osc(frame)[0][key]
    
    def test_repeated_icon_names_and_types(self, parse_osc):
        options = NotificationOptions(icon_names=["bell", "alert"], types=["info", "warning"])
        (frame,) = build_notification(["Title"], options)
        meta, _ = parse_osc(frame)
        
        assert meta["n"] == [b64("bell"), b64("alert")]
        assert meta["t"] == [b64("info"), b64("warning")]
    
    def test_key_order_is_fixed(self):
        options = NotificationOptions(urgency=1, actions="open", identifier="x")
        assert build_metadata(options, payload_type="title") == [
            "a=open", "i=x", "p=title", "u=1",
        ]
    
    def test_unicode_base64(self):
        meta = build_metadata(NotificationOptions(app="café"))
        assert meta == [f"f={b64('café')}"]
