"""
Conversions between tagged tokens and their text renderings.

Tagged text is rendered as ``<tag>word</tag>`` pairs separated by single
spaces. Readable text uses ``word/TAG``.
"""
import re
from typing import Iterable, List, Optional, Sequence, Tuple

from engtagger.tag.tagset import explain_tag

__all__ = ['TaggedToken', 'to_markup', 'to_readable', 'parse_markup',
           'strip_tags', 'join_words']

TaggedToken = Tuple[str, str]

_TAGGED_TOKEN = re.compile(r"<(\w+)>(.+?)</\1>", re.DOTALL)
_TAG = re.compile(r"<[^>]+>")
_SPACES = re.compile(r"\s+")

# attach to the following word
_OPENING = frozenset(("`", "``", "(", "[", "{", "$", "#"))
# clitics attach to the preceding word
_CLITICS = frozenset(("n't", "'s", "'d", "'m", "'ll", "'re", "'ve", "'"))
_PUNCTUATION = re.compile(r"\A\W+\Z")
# stand alone between words
_DASHES = frozenset(("-", "--"))


def _tag_name(tag: str, verbose: bool) -> str:
    return explain_tag(tag) if verbose else tag


def to_markup(pairs: Iterable[TaggedToken], verbose: bool = False) -> str:
    return " ".join(f"<{t}>{word}</{t}>" for word, t in
                    ((w, _tag_name(tag, verbose)) for w, tag in pairs))


def to_readable(pairs: Iterable[TaggedToken], verbose: bool = False) -> str:
    return " ".join(f"{word}/{_tag_name(tag, verbose).upper()}"
                    for word, tag in pairs)


def parse_markup(tagged: str) -> List[TaggedToken]:
    """ Read ``<tag>word</tag>`` pairs back into (word, tag) tuples. """
    return [(word, tag) for tag, word in _TAGGED_TOKEN.findall(tagged)]


def strip_tags(tagged: str) -> Optional[str]:
    """ Return the text with tags removed and whitespace collapsed. """
    if tagged is None:
        return None
    text = _TAG.sub("", tagged)
    return _SPACES.sub(" ", text).strip()


def join_words(words: Sequence[str]) -> str:
    """ Join tokens of a sentence, attaching punctuation to its words. """
    text, attach = "", True
    for word in words:
        if attach or word in _CLITICS or (
                _PUNCTUATION.match(word) and word not in _OPENING
                and word not in _DASHES):
            text += word
        else:
            text += " " + word
        attach = word in _OPENING
    return text
