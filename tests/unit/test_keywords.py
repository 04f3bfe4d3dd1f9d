"""
Unit tests for keyword extraction.

Tests tokenization rules in resumematch.contexts.matching.keywords.
"""

import pytest

from resumematch.contexts.matching.keywords import (
    clean_window,
    extract_keywords,
    extract_ngrams,
    extract_unigrams,
    is_keyword_phrase,
)
from resumematch.contexts.matching.patterns import VOCABULARY

STOP_WORDS = VOCABULARY.stop_words


@pytest.mark.unit
class TestExtractUnigrams:
    """Tests for single-word extraction."""

    def test_keeps_symbol_tokens(self):
        """+, #, . and / survive so tech names stay whole."""
        words = extract_unigrams("c++ and node.js with ci/cd", STOP_WORDS)
        assert words == ["c++", "node.js", "ci/cd"]

    def test_drops_short_tokens(self):
        """Tokens of two characters or fewer are dropped (c# included)."""
        words = extract_unigrams("c# go ml python", STOP_WORDS)
        assert words == ["python"]

    def test_drops_stop_words(self):
        words = extract_unigrams("the team with their tools", STOP_WORDS)
        assert words == ["team", "tools"]

    def test_punctuation_becomes_separator(self):
        words = extract_unigrams("python,sql;(docker)", STOP_WORDS)
        assert words == ["python", "sql", "docker"]


@pytest.mark.unit
class TestNgrams:
    """Tests for bigram/trigram windows."""

    def test_clean_window_strips_symbols(self):
        assert clean_window(["python,", "sql"]) == "python sql"
        assert clean_window(["c++", "developer"]) == "c developer"

    def test_phrase_rejects_stop_words(self):
        assert not is_keyword_phrase("experience with", STOP_WORDS)
        assert is_keyword_phrase("machine learning", STOP_WORDS)

    def test_phrase_rejects_single_letters(self):
        assert not is_keyword_phrase("r programming", STOP_WORDS)

    def test_phrase_rejects_empty_middle_token(self):
        """A punctuation-only middle token leaves a double space, which fails."""
        assert not is_keyword_phrase("python  aws", STOP_WORDS)

    def test_bigrams_and_trigrams(self):
        bigrams, trigrams = extract_ngrams("machine learning engineer", STOP_WORDS)
        assert bigrams == ["machine learning", "learning engineer"]
        assert trigrams == ["machine learning engineer"]

    def test_single_token_has_no_ngrams(self):
        assert extract_ngrams("python", STOP_WORDS) == ([], [])


@pytest.mark.unit
class TestExtractKeywords:
    """Tests for the combined keyword list."""

    def test_order_unigrams_then_bigrams_then_trigrams(self):
        assert extract_keywords("machine learning engineer") == [
            "machine",
            "learning",
            "engineer",
            "machine learning",
            "learning engineer",
            "machine learning engineer",
        ]

    def test_lowercases(self):
        assert extract_keywords("PYTHON") == ["python"]

    def test_deduplicates(self):
        keywords = extract_keywords("python python python")
        assert keywords.count("python") == 1
        assert len(keywords) == len(set(keywords))

    def test_multiword_phrase_survives(self):
        assert "machine learning" in extract_keywords("Strong machine learning background")

    def test_stop_word_windows_excluded(self):
        keywords = extract_keywords("experience with python")
        assert "experience with" not in keywords
        assert "with python" not in keywords

    def test_punctuated_bigram(self):
        assert "python sql" in extract_keywords("Python, SQL")

    def test_punctuation_token_breaks_trigram(self):
        keywords = extract_keywords("python - aws")
        assert "python aws" not in keywords
        assert "python  aws" not in keywords
        assert keywords == ["python", "aws"]

    def test_symbol_tokens(self):
        keywords = extract_keywords("C++ and C# developer, Node.js / CI/CD")
        assert "c++" in keywords
        assert "node.js" in keywords
        assert "ci/cd" in keywords
        assert "c#" not in keywords

    @pytest.mark.parametrize("text", ["", "   ", "\n\t\n"])
    def test_empty_text(self, text):
        assert extract_keywords(text) == []
