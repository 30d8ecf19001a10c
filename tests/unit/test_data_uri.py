"""Unit tests for data URI parsing."""
import base64
import pytest

from app.core.exceptions import ValidationError
from app.utils.data_uri import build_data_uri, is_data_uri, parse_data_uri


class TestDataURI:
    """Test the data URI parser."""

    def test_parse_valid_data_uri(self):
        payload = base64.b64encode(b"\x89PNG fake").decode()
        decoded = parse_data_uri(f"data:image/png;base64,{payload}")

        assert decoded.mime_type == "image/png"
        assert decoded.data == b"\x89PNG fake"

    @pytest.mark.parametrize("value", [
        "data:image/png,notbase64",
        "data:;base64,AAAA",
        "data:image/png;base64,",
        "data:image/png;base64,@@@not-base64@@@",
        "https://example.com/image.jpg",
        "",
    ])
    def test_malformed_data_uri(self, value):
        with pytest.raises(ValidationError) as exc_info:
            parse_data_uri(value)
        assert exc_info.value.message == "Invalid base64 image format"

    def test_build_from_bytes_and_string(self):
        assert build_data_uri("image/jpeg", b"abc") == "data:image/jpeg;base64,YWJj"
        assert build_data_uri("image/png", "YWJj") == "data:image/png;base64,YWJj"

    def test_is_data_uri(self):
        assert is_data_uri("data:image/png;base64,AAAA")
        assert not is_data_uri("https://img.youtube.com/vi/x/maxresdefault.jpg")
