"""
Map raw tokens to the keys used for lexicon lookup.

Known words are looked up as they are (or with a lowercased first letter);
everything else is reduced to a pseudo-token describing its shape, e.g.
``"40th"`` becomes ``"*ORD*"`` and ``"wikiing"`` becomes ``"-ing-"``.
"""
import re

from engtagger.lexicon import Lexicon

__all__ = ['WordClassifier', 'UNKNOWN', 'SYMBOL_WORD', 'lcfirst', 'ucfirst']

UNKNOWN = "-unknown-"
SYMBOL_WORD = "-sym-"

_LEFT_BRACKET = re.compile(r"[({\[]")
_RIGHT_BRACKET = re.compile(r"[)}\]]")
_NUMBER = re.compile(r"-?(?:\d+(?:\.\d*)?|\.\d+)\Z")
_NUMBER_CONSTRUCT = re.compile(r"\A\d+[\d/:-]+\d\Z")
_ORDINAL = re.compile(r"\A-?\d+\w+\Z")
_ABBREVIATION = re.compile(r"\A[A-Z][A-Z.-]*\Z")
_HYPHENATED = re.compile(r"\w-\w")
_HYPHEN_SUFFIX = re.compile(r"-([^-]+)\Z")
_SYMBOLS = re.compile(r"\A\W+\Z")

# checked in order when nothing else matched
_SUFFIX_CLASSES = [
    ("ing", "-ing-"),
    ("s", "-s-"),
    ("tion", "-tion-"),
    ("ly", "-ly-"),
    ("ed", "-ed-"),
]


def lcfirst(word: str) -> str:
    return word[:1].lower() + word[1:]


def ucfirst(word: str) -> str:
    return word[:1].upper() + word[1:]


class WordClassifier:
    """ Decides which lexicon entry describes a token. """

    def __init__(self, lexicon: Lexicon):
        self.lexicon = lexicon

    def __call__(self, word: str) -> str:
        return self.clean_word(word)

    def clean_word(self, word: str) -> str:
        """
        Return the word as seen in the lexicon, its lowercase-first form, or
        the unknown-word class of the original word.
        """
        if word in self.lexicon:
            return word
        lcf = lcfirst(word)
        if lcf in self.lexicon:
            return lcf
        return self.classify_unknown_word(word)

    def classify_unknown_word(self, word: str) -> str:
        if _LEFT_BRACKET.search(word):
            return "*LRB*"
        if _RIGHT_BRACKET.search(word):
            return "*RRB*"
        if _NUMBER.search(word) or _NUMBER_CONSTRUCT.match(word):
            return "*NUM*"
        if _ORDINAL.match(word):
            return "*ORD*"
        if _ABBREVIATION.match(word):
            return "-abr-"
        if _HYPHENATED.search(word):
            return self._classify_hyphenated(word)
        if _SYMBOLS.match(word):
            return SYMBOL_WORD
        if word == ucfirst(word):
            return "-cap-"
        for suffix, cls in _SUFFIX_CLASSES:
            if word.endswith(suffix):
                return cls
        return UNKNOWN

    def _classify_hyphenated(self, word: str) -> str:
        match = _HYPHEN_SUFFIX.search(word)
        # is the last part of the word an adjective?
        if match and "jj" in self.lexicon.emissions(match.group(1)):
            return "-hyp-adj-"
        return "-hyp-"
