"""
Word respelling transformer for single lines of text.

A line is split into word tokens and the separator runs between them. Each
word is lowercased and pushed through an ordered chain of spelling rules
(hard and soft c, vowel digraphs, doubled letters, trailing e), articles
are dropped, capitals are restored, and the pieces are merged back by
position.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set

from ..utils.logger import get_logger

logger = get_logger(__name__)

WORD_PATTERN = re.compile(r'\w+')
SEPARATOR_PATTERN = re.compile(r'\W+')
LEADING_SEPARATOR_PATTERN = re.compile(r'^\W')

HARD_C_PATTERN = re.compile(r'c([^iek])')
SOFT_C_PATTERN = re.compile(r'c([ie])')
DOUBLED_LETTER_PATTERN = re.compile(r'([a-z])\1')

DEFAULT_ARTICLES = ('the', 'a', 'an')
DEFAULT_JOINER = ', '

@dataclass
class RespelledToken:
    """A transformed word and its ordinal position among the line's words."""
    index: int
    text: str

@dataclass
class RespellResult:
    """Container for the intermediate and final results of one line."""
    text: str
    leading: str
    leads_with_separator: bool
    tokens: List[RespelledToken] = field(default_factory=list)
    separators: List[str] = field(default_factory=list)
    article_indices: Set[int] = field(default_factory=set)
    uppercase_indices: Set[int] = field(default_factory=set)

def respell_word(word: str) -> str:
    """
    Apply the spelling rules to a single lowercase word.

    The order matters: 'ck' produced by the hard-c rule collapses to 'k',
    and 'ee'/'oo' become 'i'/'u' before the generic doubled-letter rule
    would reduce them to 'e'/'o'.

    Args:
        word: Lowercase word

    Returns:
        Respelled word
    """
    word = HARD_C_PATTERN.sub(r'k\1', word)
    word = word.replace('ck', 'k')
    word = SOFT_C_PATTERN.sub(r's\1', word)

    word = word.replace('ee', 'i').replace('oo', 'u')
    word = DOUBLED_LETTER_PATTERN.sub(r'\1', word)

    if word.count('e') > 1 and word.endswith('e'):
        word = word[:-1]
    return word

def _capitalize_first(word: str) -> str:
    return word[:1].upper() + word[1:]

class WordRespeller:
    """Respells the words of a line and reassembles it around its separators."""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.config = config or {}
        articles = self.config.get('articles', DEFAULT_ARTICLES)
        if isinstance(articles, str) or not all(isinstance(a, str) for a in articles):
            raise ValueError("articles must be a list of strings")
        self.articles = {a.lower() for a in articles}
        self.joiner = self.config.get('joiner', DEFAULT_JOINER)
        if not isinstance(self.joiner, str):
            raise ValueError("joiner must be a string")

    def respell(self, line: str) -> RespellResult:
        """
        Transform a line and keep the intermediate collections.

        Args:
            line: A single line of text without its terminator

        Returns:
            RespellResult with the assembled output in ``text``
        """
        leads_with_separator = bool(LEADING_SEPARATOR_PATTERN.match(line))

        words = WORD_PATTERN.findall(line)
        separators = WORD_PATTERN.split(line)
        lowercase_words = [w for w in SEPARATOR_PATTERN.split(line.lower()) if w]

        if len(words) != len(lowercase_words):
            logger.warning(
                f"Case-sensitive and lowercase splits differ "
                f"({len(words)} vs {len(lowercase_words)} words); "
                f"capitalization may land on the wrong word"
            )

        uppercase_indices = {i for i, w in enumerate(words) if w[0].isupper()}
        article_indices = {i for i, w in enumerate(lowercase_words) if w in self.articles}

        tokens = []
        for index, word in enumerate(lowercase_words):
            respelled = respell_word(word)
            if not respelled or index in article_indices:
                continue
            # 'ann' -> 'an', 'aa' -> 'a': no article may appear in the output
            if respelled in self.articles:
                logger.debug(f"Dropping '{word}': respells to article '{respelled}'")
                continue
            if index in uppercase_indices:
                respelled = _capitalize_first(respelled)
            tokens.append(RespelledToken(index, respelled))

        logger.debug(f"words={words} articles={sorted(article_indices)} "
                     f"uppercase={sorted(uppercase_indices)}")

        remaining_separators = list(separators)
        remaining_tokens = list(tokens)
        if leads_with_separator:
            leading = remaining_separators.pop(0)
        elif remaining_tokens:
            leading = remaining_tokens.pop(0).text
        else:
            leading = ''

        text = leading + self._merge(remaining_separators, remaining_tokens)

        return RespellResult(
            text=text,
            leading=leading,
            leads_with_separator=leads_with_separator,
            tokens=tokens,
            separators=separators,
            article_indices=article_indices,
            uppercase_indices=uppercase_indices,
        )

    def transform(self, line: str) -> str:
        """Transform a line and return only the output text."""
        return self.respell(line).text

    def _merge(self, separators: List[str], tokens: List[RespelledToken]) -> str:
        """Overlay tokens onto separator fragments by position and join them."""
        by_position = {i: s for i, s in enumerate(separators)}
        by_position.update((t.index, t.text) for t in tokens)
        return self.joiner.join(by_position[i] for i in sorted(by_position))

def transform_line(line: str, config: Optional[Dict[str, Any]] = None) -> str:
    """Respell one line with the given (or default) configuration."""
    return WordRespeller(config).transform(line)
