"""
Keyword extraction from free text.

Turns resume or job description text into an ordered list of unique candidate
keywords: filtered unigrams first, then bigrams, then trigrams. Multi-word
phrases ("machine learning", "product owner") survive as single keywords even
though their parts would be generic on their own.
"""

from typing import List, Optional, Sequence, Tuple

from resumematch.contexts.matching.patterns import VOCABULARY, TokenPatterns, Vocabulary


def extract_unigrams(lowered: str, stop_words) -> List[str]:
    """
    Extract single-word keywords from lowercased text.

    Characters other than letters, digits, whitespace, +, #, . and / become
    spaces. Tokens of three or more characters that are not stop words are kept.

    Args:
        lowered: Lowercased input text
        stop_words: Words to drop

    Returns:
        Qualifying tokens in text order (may contain duplicates)
    """
    cleaned = TokenPatterns.UNIGRAM_NOISE.sub(" ", lowered)
    return [w for w in cleaned.split() if len(w) > 2 and w not in stop_words]


def clean_window(tokens: Sequence[str]) -> str:
    """Join a token window with spaces and strip everything but letters, digits and spaces."""
    return TokenPatterns.NGRAM_NOISE.sub("", " ".join(tokens)).strip()


def is_keyword_phrase(phrase: str, stop_words) -> bool:
    """
    Check whether a cleaned n-gram window qualifies as a keyword phrase.

    Every space-separated part must be longer than one character and must not
    be a stop word. Splitting on single spaces means a window whose middle token
    was pure punctuation (leaving a double space) is rejected.
    """
    return all(len(w) > 1 and w not in stop_words for w in phrase.split(" "))


def extract_ngrams(lowered: str, stop_words) -> Tuple[List[str], List[str]]:
    """
    Extract bigram and trigram phrases from lowercased text.

    Windows are built over plain whitespace tokens (no character filtering
    before windowing), then cleaned with clean_window().

    Args:
        lowered: Lowercased input text
        stop_words: Words that disqualify a window

    Returns:
        (bigrams, trigrams) in text order (may contain duplicates)
    """
    tokens = lowered.split()
    bigrams = []
    trigrams = []

    for i in range(len(tokens) - 1):
        bigram = clean_window(tokens[i : i + 2])
        if is_keyword_phrase(bigram, stop_words):
            bigrams.append(bigram)

        if i < len(tokens) - 2:
            trigram = clean_window(tokens[i : i + 3])
            if is_keyword_phrase(trigram, stop_words):
                trigrams.append(trigram)

    return bigrams, trigrams


def extract_keywords(text: str, vocabulary: Optional[Vocabulary] = None) -> List[str]:
    """
    Extract the deduplicated keyword list for a text.

    Args:
        text: Raw resume or job description text
        vocabulary: Vocabulary supplying stop words (default: packaged VOCABULARY)

    Returns:
        Unique lowercase keywords; unigrams, then bigrams, then trigrams, each in
        order of first appearance

    Example:
        >>> extract_keywords("Experience with machine learning")
        ['experience', 'machine', 'learning', 'machine learning']
    """
    vocabulary = vocabulary or VOCABULARY
    lowered = text.lower()

    unigrams = extract_unigrams(lowered, vocabulary.stop_words)
    bigrams, trigrams = extract_ngrams(lowered, vocabulary.stop_words)

    return list(dict.fromkeys(unigrams + bigrams + trigrams))
