"""Unit tests for encoding detection and line decoding.

WHY: Praat switches to UTF-16 as soon as a label needs it, so a corpus
usually mixes encodings. A wrong guess turns every label into mojibake
or fails the ooTextFile precondition.

HOW: Byte strings for each BOM, BOM-less UTF-16, UTF-8 and Latin-1 are
passed to detect_encoding(); read_lines() is checked on tmp files.
"""

import codecs

import pytest

from textgrid_converter.core.encoding import decode_lines, detect_encoding, read_lines
from textgrid_converter.core.errors import EncodingDetectionError

SAMPLE = 'File type = "ooTextFile"\nname = "ʃə"\n'


class TestDetectEncoding:

    def test_utf8_bom(self):
        assert detect_encoding(codecs.BOM_UTF8 + SAMPLE.encode("utf-8")) == "utf-8-sig"

    def test_utf16_be_bom(self):
        assert detect_encoding(codecs.BOM_UTF16_BE + SAMPLE.encode("utf-16-be")) == "utf-16"

    def test_utf16_le_bom(self):
        assert detect_encoding(codecs.BOM_UTF16_LE + SAMPLE.encode("utf-16-le")) == "utf-16"

    def test_bomless_utf16_be(self):
        assert detect_encoding(SAMPLE.encode("utf-16-be")) == "utf-16-be"

    def test_bomless_utf16_le(self):
        assert detect_encoding(SAMPLE.encode("utf-16-le")) == "utf-16-le"

    def test_plain_utf8(self):
        assert detect_encoding(SAMPLE.encode("utf-8")) == "utf-8"

    def test_latin1_fallback(self):
        assert detect_encoding('text = "café"'.encode("latin-1")) == "latin-1"

    def test_empty(self):
        assert detect_encoding(b"") == "utf-8"


class TestDecodeLines:

    def test_bom_removed_with_plain_utf8(self):
        raw = codecs.BOM_UTF8 + b"a\nb"
        assert decode_lines(raw, "utf-8") == ["a", "b"]

    def test_crlf(self):
        assert decode_lines(b"a\r\nb\r\n", "utf-8") == ["a", "b"]

    def test_bad_bytes(self):
        with pytest.raises(EncodingDetectionError, match="utf-8"):
            decode_lines(b"\xff\xfe\xfa", "utf-8")

    def test_unknown_codec(self):
        with pytest.raises(EncodingDetectionError):
            decode_lines(b"abc", "no-such-codec")


class TestReadLines:

    @pytest.mark.parametrize("encoding", ["utf-8", "utf-8-sig", "utf-16", "utf-16-be"])
    def test_round_trip(self, tmp_path, encoding):
        path = tmp_path / "sample.TextGrid"
        path.write_bytes(SAMPLE.encode(encoding))
        assert read_lines(path) == ['File type = "ooTextFile"', 'name = "ʃə"']

    def test_explicit_encoding_skips_detection(self, tmp_path):
        path = tmp_path / "sample.TextGrid"
        path.write_bytes("é".encode("utf-8"))
        assert read_lines(path, encoding="latin-1") == ["Ã©"]
