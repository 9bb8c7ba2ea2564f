import re
from collections import defaultdict
from typing import Callable, Collection, Dict, Iterable, List, Sequence

from engtagger.extract.grammar import max_noun_phrase_spans, split_extensions
from engtagger.tag.markup import TaggedToken
from engtagger.tag.tagset import (ADJECTIVE_TAGS, ADVERB_TAGS,
                                  CONJUNCTION_TAGS, INTERROGATIVE_TAGS,
                                  NOUN_TAGS, PROPER_NOUN_TAGS, VERB_TAGS)

__all__ = ['CATEGORIES', 'MAX_MATCH_LENGTH', 'count_matches',
           'proper_nouns', 'max_noun_phrases', 'noun_phrases']

Counts = Dict[str, int]
Stemmer = Callable[[str], str]

# matches of this length or longer are not words
MAX_MATCH_LENGTH = 100

CATEGORIES = {
    "nouns": NOUN_TAGS,
    "verbs": VERB_TAGS,
    "infinitive_verbs": frozenset(("vb",)),
    "past_tense_verbs": frozenset(("vbd",)),
    "gerund_verbs": frozenset(("vbg",)),
    "passive_verbs": frozenset(("vbn",)),
    "base_present_verbs": frozenset(("vbp",)),
    "present_verbs": frozenset(("vbz",)),
    "adjectives": frozenset(("jj",)),
    "comparative_adjectives": frozenset(("jjr",)),
    "superlative_adjectives": frozenset(("jjs",)),
    "all_adjectives": ADJECTIVE_TAGS,
    "adverbs": ADVERB_TAGS,
    "interrogatives": INTERROGATIVE_TAGS,
    "conjunctions": CONJUNCTION_TAGS,
}

_SPACES = re.compile(r"\s+")


def _identity(word: str) -> str:
    return word


def _squeeze(text: str) -> str:
    return _SPACES.sub(" ", text).strip()


def _join(pairs: Iterable[TaggedToken]) -> str:
    return _squeeze(" ".join(word for word, _ in pairs))


def _count(matches: Iterable[str], stemmer: Stemmer) -> Counts:
    counts = defaultdict(int)
    for match in matches:
        text = stemmer(_squeeze(match))
        if len(text) >= MAX_MATCH_LENGTH or not text.strip():
            continue
        counts[text] += 1
    return dict(counts)


def count_matches(pairs: Sequence[TaggedToken], tags: Collection[str],
                  stemmer: Stemmer = None) -> Counts:
    """
    Count the words tagged with one of `tags`.

    Parameters
    ----------
    pairs
        Tagged text as (word, tag) pairs.
    tags
        Tags of the words to count.
    stemmer
        Applied to every word before counting.

    Returns
    -------
    Occurrences of every (stemmed) word.
    """
    return _count((word for word, tag in pairs if tag in tags),
                  stemmer or _identity)


def proper_nouns(pairs: Sequence[TaggedToken],
                 stemmer: Stemmer = None) -> Counts:
    """
    Count proper nouns. Consecutive proper nouns form a single name, so
    ``Linguistic Data Consortium`` is found as one unit. When a (stemmed)
    name has more than two words and its acronym was also found, the
    acronym's occurrences are added to the name.
    """
    names, run = [], []
    for word, tag in list(pairs) + [("", "")]:
        if tag in PROPER_NOUN_TAGS:
            run.append(word)
        elif run:
            names.append(" ".join(run))
            run = []

    counts = _count(names, stemmer or _identity)
    for name in list(counts):
        words = name.split(" ")
        if len(words) <= 2:
            continue
        acronym = "".join(word[0] for word in words)
        if acronym in counts:
            counts[name] += counts.pop(acronym)
    return counts


def max_noun_phrases(pairs: Sequence[TaggedToken],
                     stemmer: Stemmer = None) -> Counts:
    """ Count maximal noun phrases; single word phrases are stemmed. """
    stemmer = stemmer or _identity
    pairs = list(pairs)
    tags = [tag for _, tag in pairs]
    counts = defaultdict(int)
    for start, end in max_noun_phrase_spans(tags):
        phrase = _join(pairs[start:end])
        if " " not in phrase:
            phrase = stemmer(phrase)
        if phrase.strip():
            counts[phrase] += 1
    return dict(counts)


def _phrase_occurrences(pairs: List[TaggedToken]) -> Dict[str, int]:
    """ Every noun phrase contained in the maximal noun phrases. """
    tags = [tag for _, tag in pairs]
    found = defaultdict(int)
    parts = []
    for start, end in max_noun_phrase_spans(tags):
        extended, spans = split_extensions(tags[start:end])
        # a phrase extended by a preposition, determiner or number counts
        # as a whole too
        if extended:
            found[_join(pairs[start:end])] += 1
        parts.extend(pairs[start + s:start + e] for s, e in spans)

    for words in parts:
        # shorten the phrase from the left, recording it while it has more
        # than one word and every noun that falls off
        while words:
            if len(words) > 1:
                found[_join(words)] += 1
            word, tag = words[0]
            words = words[1:]
            if tag in NOUN_TAGS:
                found[_squeeze(word)] += 1
    return found


def noun_phrases(pairs: Sequence[TaggedToken], longest_noun_phrase: int = 5,
                 weight_noun_phrases: bool = False,
                 stemmer: Stemmer = None) -> Counts:
    """
    Count all nouns and noun phrases.

    Parameters
    ----------
    pairs
        Tagged text as (word, tag) pairs.
    longest_noun_phrase
        Phrases with more words are dropped.
    weight_noun_phrases
        Multiply the occurrences by the number of words in the phrase.
    stemmer
        Applied to single word entries only.

    Returns
    -------
    Occurrences of every noun and noun phrase.
    """
    stemmer = stemmer or _identity
    counts = defaultdict(int)
    for phrase, occurrences in _phrase_occurrences(list(pairs)).items():
        if not phrase:
            continue
        word_count = phrase.count(" ") + 1
        if word_count > longest_noun_phrase:
            continue
        if word_count == 1:
            phrase = stemmer(phrase)
        multiplier = word_count if weight_noun_phrases else 1
        counts[phrase] += multiplier * occurrences
    return dict(counts)
