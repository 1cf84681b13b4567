import pytest

from prefix_trie.colors import InvalidHexError, hex_to_rgb, language_column, strip_hash


class TestColors:
    def test_strip_hash(self):
        assert strip_hash("#FF0000") == "FF0000"
        assert strip_hash(" ff0000\n") == "ff0000"
        assert strip_hash("ff0000") == "ff0000"

    def test_hex_to_rgb(self):
        assert hex_to_rgb("ff0000") == (255, 0, 0)
        assert hex_to_rgb("#00FF80") == (0, 255, 128)
        assert hex_to_rgb("000000") == (0, 0, 0)
        assert hex_to_rgb("a0B1c2") == (160, 177, 194)

    @pytest.mark.parametrize("code", ["", "fff", "ff00000", "gg0000", "ff 000", "#ff00zz"])
    def test_hex_to_rgb_invalid(self, code):
        with pytest.raises(InvalidHexError) as exc_info:
            hex_to_rgb(code)
        assert "invalid hex value entered" in str(exc_info.value)

    def test_invalid_hex_is_value_error(self):
        with pytest.raises(ValueError):
            hex_to_rgb("nothex")

    def test_language_column(self):
        assert language_column("en") == 1
        assert language_column(" DE ") == 3
        with pytest.raises(ValueError):
            language_column("xx")
