"""
Chunk Encoder Tests
===================
"""

import pytest

from vtc.graphics.chunking import chunk, iter_chunks


class TestChunk:
    """Tests for base64 text slicing."""
    
    def test_exact_multiple(self):
        assert chunk("abcdefgh", 4) == ["abcd", "efgh"]
    
    def test_remainder_in_last_slice(self):
        assert chunk("abcdefghij", 4) == ["abcd", "efgh", "ij"]
    
    def test_no_realignment_to_multiples_of_four(self):
        """Slices follow the character index even for odd sizes."""
        assert chunk("QUJDREVG", 3) == ["QUJ", "DRE", "VG"]
    
    def test_text_shorter_than_size(self):
        assert chunk("abc", 4096) == ["abc"]
    
    def test_empty_text_yields_no_chunks(self):
        assert chunk("", 4) == []
        assert list(iter_chunks("", 4)) == []
    
    def test_default_size_is_4096(self):
        slices = chunk("A" * 5000)
        assert [len(s) for s in slices] == [4096, 904]
    
    @pytest.mark.parametrize("size", [0, -1])
    def test_rejects_non_positive_size(self, size):
        with pytest.raises(ValueError):
            chunk("abc", size)
        with pytest.raises(ValueError):
            list(iter_chunks("abc", size))
    
    def test_concatenation_reproduces_text(self):
        text = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/=="
        for size in (1, 2, 7, 40, len(text), len(text) + 1):
            assert "".join(chunk(text, size)) == text


class TestIterChunks:
    """Tests for lazy Chunk records."""
    
    def test_first_and_last_flags(self):
        chunks = list(iter_chunks("abcdefghij", 4))
        
        assert [c.index for c in chunks] == [0, 1, 2]
        assert [c.payload for c in chunks] == ["abcd", "efgh", "ij"]
        assert [c.is_first for c in chunks] == [True, False, False]
        assert [c.is_last for c in chunks] == [False, False, True]
    
    def test_single_chunk_is_first_and_last(self):
        (only,) = list(iter_chunks("abc", 10))
        assert only.is_first and only.is_last
    
    def test_repr_hides_payload(self):
        (only,) = list(iter_chunks("secretpayload", 100))
        assert "secretpayload" not in repr(only)
