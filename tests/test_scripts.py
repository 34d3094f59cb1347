import pytest

from script.prepare_wordlist import clean_words

pytest.importorskip("bs4")
from script.extract_secret_words import extract_words  # noqa: E402

HTML = """
<html><body>
  <p>Today's answer is below. Think twice!</p>
  <ul>
    <li>2024-01-02 (Tue) 927 SCOOP</li>
    <li>2024-01-01 (Mon) 926 CRANE</li>
    <li>2023-12-31 (Sun) 925 SCOOP</li>
  </ul>
  <footer>ABOUT us</footer>
</body></html>
"""


def test_clean_words_sorts_dedupes_and_filters():
    words, rejected = clean_words(["Stare", "crane", "", "  crane ", "raiser", "c4ne!"], 5)
    assert words == ["crane", "stare"]
    assert rejected == 2


def test_extract_words_caps_only():
    assert extract_words(HTML) == ["about", "crane", "scoop"]


def test_extract_words_with_selector():
    assert extract_words(HTML, selector="ul li") == ["crane", "scoop"]


def test_extract_words_any_case():
    words = extract_words(HTML, caps_only=False)
    assert "think" in words and "below" in words and "crane" in words
