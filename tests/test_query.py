"""
Query Encoder Tests
===================
"""

import pytest
from pydantic import ValidationError

from vtc.graphics import build_query
from vtc.models import QueryOptions


class TestBuildQuery:
    """Tests for the support query frame."""
    
    def test_default_image_id(self):
        assert build_query() == "\x1b_Ga=q,i=31;\x1b\\"
    
    def test_custom_image_id(self, parse_apc):
        meta, payload = parse_apc(build_query(image_id=42))
        assert meta == {"a": "q", "i": "42"}
        assert payload == ""
    
    @pytest.mark.parametrize("quiet", [0, 1, 2])
    def test_quiet_level(self, quiet):
        assert build_query(quiet=quiet) == f"\x1b_Ga=q,i=31,q={quiet};\x1b\\"
    
    def test_configured_default_id(self):
        assert build_query(default_image_id=7) == "\x1b_Ga=q,i=7;\x1b\\"
    
    def test_quiet_out_of_range_rejected(self):
        with pytest.raises(ValidationError):
            QueryOptions(quiet=3)
