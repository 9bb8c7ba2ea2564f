"""
The maximal noun phrase (MNP) grammar.

A noun phrase is an optional cardinal number, any gerunds, adjectives and
participles, and one or more nouns; it may be extended by further noun
groups joined with prepositions, determiners or numbers::

    cd? (vbg|jj|vbn)* nn+ ( in* det? cd? (vbg|jj|vbn)* nn+ )*

Tags are mapped to single letter classes and the grammar is matched over
the resulting string, so matching depends only on tag identity.
"""
import re
from typing import List, Sequence, Tuple

from engtagger.tag.tagset import MODIFIER_TAGS, NOUN_TAGS

__all__ = ['tag_classes', 'max_noun_phrase_spans', 'split_extensions',
           'MNP_PATTERN', 'EXTENSION_PATTERN']

NUMBER, MODIFIER, NOUN, PREPOSITION, DETERMINER, OTHER = "CANPDx"

_CLASSES = {"cd": NUMBER, "in": PREPOSITION, "det": DETERMINER}
_CLASSES.update(dict.fromkeys(MODIFIER_TAGS, MODIFIER))
_CLASSES.update(dict.fromkeys(NOUN_TAGS, NOUN))

MNP_PATTERN = re.compile(r"C?A*N+(?:P*D?C?A*N+)*")
# prepositions, determiners and numbers that extend a phrase
EXTENSION_PATTERN = re.compile(r"[PDC]+")

Span = Tuple[int, int]


def tag_classes(tags: Sequence[str]) -> str:
    return "".join(_CLASSES.get(tag, OTHER) for tag in tags)


def max_noun_phrase_spans(tags: Sequence[str]) -> List[Span]:
    """ Non-overlapping, leftmost longest MNP matches as (start, end). """
    return [m.span() for m in MNP_PATTERN.finditer(tag_classes(tags))]


def split_extensions(tags: Sequence[str]) -> Tuple[bool, List[Span]]:
    """
    Split a phrase on its extensions.

    Returns
    -------
    Whether the phrase contains an extension and the (start, end) spans of
    the non-empty parts between extensions.
    """
    classes = tag_classes(tags)
    parts, start, extended = [], 0, False
    for m in EXTENSION_PATTERN.finditer(classes):
        extended = True
        if m.start() > start:
            parts.append((start, m.start()))
        start = m.end()
    if start < len(classes):
        parts.append((start, len(classes)))
    return extended, parts
