import pytest

from link_detector.detection.patterns import LINK_PATTERN


def matches(text: str) -> list[str]:
    return [m.group(0) for m in LINK_PATTERN.finditer(text)]


class TestLinkPattern:
    @pytest.mark.parametrize("scheme", ["http", "https", "ftp", "HTTP", "Ftp"])
    def test_supported_schemes(self, scheme: str) -> None:
        assert matches(f"{scheme}://example.com") == [f"{scheme}://example.com"]

    @pytest.mark.parametrize(
        "text", ["mailto://example.com", "sftp://example.com", "file://tmp/x"]
    )
    def test_other_schemes_are_ignored(self, text: str) -> None:
        assert matches(text) == []

    def test_requires_character_after_scheme(self) -> None:
        assert matches("https://") == []
        assert matches("https://.") == []

    def test_word_character_before_scheme_prevents_match(self) -> None:
        assert matches("_https://example.com") == []
        assert matches("-https://example.com") == ["https://example.com"]

    def test_stops_at_whitespace_and_quotes(self) -> None:
        assert matches('"https://example.com/a b"') == ["https://example.com/a"]

    def test_unbalanced_opening_parenthesis(self) -> None:
        assert matches("https://example.com/a_(b c") == ["https://example.com/a_(b"]

    def test_matches_are_left_to_right(self) -> None:
        assert matches("ftp://one.example http://two.example") == [
            "ftp://one.example",
            "http://two.example",
        ]

    def test_case_folding_is_ascii_only(self) -> None:
        assert matches("http\u017f://example.com") == []
        assert matches("HTTP://example.com/a\u212a") == ["HTTP://example.com/a"]

    def test_unicode_word_character_before_scheme_prevents_match(self) -> None:
        assert matches("\u00e9https://example.com") == []
