import logging
from collections import namedtuple
from functools import lru_cache
from typing import Callable, Dict, List, Optional, Sequence, Union

import numpy as np
from nltk.tag.api import TaggerI
from Orange.util import dummy_callback, wrap_callback

from engtagger.extract.phrases import (CATEGORIES, count_matches,
                                       max_noun_phrases, noun_phrases,
                                       proper_nouns)
from engtagger.lexicon import Lexicon
from engtagger.preprocess import HtmlTransformer, PorterStemmer, PunctTokenizer
from engtagger.tag.classify import SYMBOL_WORD, UNKNOWN, WordClassifier
from engtagger.tag.markup import (TaggedToken, join_words, parse_markup,
                                  to_markup, to_readable)
from engtagger.tag.tagset import (DEFAULT_TAG, SENTENCE_END, SYMBOL, TAG_SET,
                                  explain_tag, is_open_class)
from engtagger.util import chunkable, valid_text

__all__ = ["TaggerConfig", "EngTagger"]

log = logging.getLogger(__name__)

Tagged = Union[str, Sequence[TaggedToken]]
Counts = Dict[str, int]


class TaggerConfig(namedtuple(
        "TaggerConfig",
        ["unknown_word_tag", "stem", "weight_noun_phrases",
         "longest_noun_phrase", "relax"],
        defaults=["", False, False, 5, False])):
    """
    Options of a tagger.

    unknown_word_tag
        Tag of words that cannot be classified; empty for the default tag.
    stem
        Stem single words with the Porter stemmer when extracting them.
    weight_noun_phrases
        Multiply the occurrences of a noun phrase by its number of words.
    longest_noun_phrase
        Ignore noun phrases with more words.
    relax
        Let words take open class tags (adjectives, nouns, adverbs, verbs)
        they were never seen with. This may improve accuracy for uncommon
        words, particularly words used polysemously.
    """
    __slots__ = ()


class EngTagger(TaggerI):
    """
    English part-of-speech tagger with a bigram model.

    Each word gets the tag that maximizes the probability of the tag
    following the previous one, weighted by how often the word was seen
    with it::

        >>> tagger = EngTagger()
        >>> tagger.get_readable("I woke up to the sound of pouring rain.")
        'I/PRP woke/VBD up/RB to/TO the/DET sound/NN of/IN pouring/VBG rain/NN ./PP'

    Parameters
    ----------
    lexicon
        Probability tables; loaded from `word_path` and `tag_path` (or the
        data directory) if not given.
    cache_size
        Size of the tag and stem caches.
    strip_markup
        Remove html markup from texts before tagging.
    options
        See :class:`TaggerConfig`.
    """
    name = 'EngTagger'

    explain_tag = staticmethod(explain_tag)

    def __init__(self, lexicon: Lexicon = None, word_path: str = None,
                 tag_path: str = None, cache_size: int = 100_000,
                 strip_markup: bool = False, **options):
        self.__conf = TaggerConfig(**options)
        unknown = self.__conf.unknown_word_tag
        if unknown and unknown not in TAG_SET:
            raise ValueError(f"Unknown tag '{unknown}'")

        if lexicon is None:
            lexicon = Lexicon.load(word_path, tag_path)
        if not lexicon:
            log.debug("Empty lexicon, all words will be tagged '%s'",
                      unknown or DEFAULT_TAG)
        self.__lexicon = lexicon
        self.cache_size = cache_size
        self.strip_markup = strip_markup
        self.tokenizer = PunctTokenizer()
        self.transformer = HtmlTransformer()
        self.classifier = WordClassifier(lexicon)
        self.stemmer = PorterStemmer(cache_size)
        # assuming that we start analyzing from the beginning of a sentence
        self.current_tag = SENTENCE_END
        self.__init_cache()

    def __init_cache(self):
        self._cached_tag = lru_cache(maxsize=self.cache_size)(self._best_tag)

    @property
    def conf(self) -> TaggerConfig:
        return self.__conf

    @property
    def lexicon(self) -> Lexicon:
        return self.__lexicon

    def __str__(self):
        return self.name

    def __getstate__(self):
        state = self.__dict__.copy()
        # the cache is not picklable
        state.pop("_cached_tag")
        return state

    def __setstate__(self, state):
        self.__dict__.update(state)
        self.__init_cache()

    # Tagging

    def reset(self):
        """ The next word starts a new sentence. """
        self.current_tag = SENTENCE_END

    def tokenize(self, text: str) -> List[str]:
        if self.strip_markup:
            text = self.transformer([text])[0]
        return self.tokenizer.tokenize(text)

    def tag(self, tokens: Union[str, List[str]]) -> List[TaggedToken]:
        """
        Tag a text or a list of tokens.

        Returns
        -------
        (token, tag) pairs in the order of the text.
        """
        if not valid_text(tokens):
            return []
        if isinstance(tokens, str):
            tokens = self.tokenize(tokens)
        return self._tag_tokens(tokens)

    tag_pairs = tag

    def _tag_tokens(self, tokens: List[str]) -> List[TaggedToken]:
        self.reset()
        try:
            tagged = []
            for word in tokens:
                tag = self.assign_tag(self.current_tag, self.clean_word(word))
                self.current_tag = tag = tag or DEFAULT_TAG
                tagged.append((word, tag))
            return tagged
        finally:
            self.reset()

    def clean_word(self, word: str) -> str:
        return self.classifier.clean_word(word)

    def assign_tag(self, prev_tag: str, word: str) -> str:
        """
        Choose the tag of a word given the previous tag.

        Returns
        -------
        The most probable tag or an empty string when no tag can follow
        `prev_tag`.
        """
        if word == UNKNOWN:
            return self.conf.unknown_word_tag
        if word == SYMBOL_WORD:
            return SYMBOL
        return self._cached_tag(prev_tag, word)

    def _best_tag(self, prev_tag: str, word: str) -> str:
        emissions = self.lexicon.emissions(word)
        best_tag, best_so_far = "", 0
        for tag, probability in self.lexicon.successors(prev_tag).items():
            if tag in emissions:
                pw = emissions[tag]
            elif self.conf.relax and is_open_class(tag):
                pw = 0
            else:
                continue
            # P(tag | prev_tag) * P(tag | word)
            score = probability * (pw + 1)
            if score > best_so_far:
                best_so_far, best_tag = score, tag
        return best_tag

    def tag_documents(self, documents: List[str],
                      callback: Callable = None) -> np.ndarray:
        """
        Tag many texts.

        Returns
        -------
        An object array with a list of tags for every document.
        """
        if callback is None:
            callback = dummy_callback
        documents = list(documents)
        if self.strip_markup:
            documents = self.transformer(documents,
                                         wrap_callback(callback, end=0.1))
        tokens = self.tokenizer(documents,
                                wrap_callback(callback, start=0.1, end=0.2))
        callback(0.2, "POS Tagging...")
        tags = self._tag_token_lists(
            tokens, on_progress=wrap_callback(callback, start=0.2))
        result = np.empty(len(tags), dtype=object)
        for i, doc_tags in enumerate(tags):
            result[i] = doc_tags
        callback(1)
        return result

    @chunkable
    def _tag_token_lists(self, tokens: List[List[str]]) -> List[List[str]]:
        return [[tag for _, tag in self._tag_tokens(doc)] for doc in tokens]

    # Renderings

    def add_tags(self, text: str, verbose: bool = False) -> Optional[str]:
        """ Return the text with every token wrapped in its tag. """
        if not valid_text(text):
            return None
        return to_markup(self.tag(text), verbose)

    def get_readable(self, text: str, verbose: bool = False) -> Optional[str]:
        """ Return the text as ``word/TAG`` tokens. """
        if not valid_text(text):
            return None
        return to_readable(self.tag(text), verbose)

    def get_sentences(self, text: str) -> Optional[List[str]]:
        """ Split the text into sentences at sentence ending punctuation. """
        if not valid_text(text):
            return None
        sentences, words = [], []
        for word, tag in self.tag(text):
            words.append(word)
            if tag == SENTENCE_END:
                sentences.append(join_words(words))
                words = []
        if words:
            sentences.append(join_words(words))
        return sentences

    # Extraction

    def stem(self, word: str) -> str:
        """ The Porter stem of the word if stemming is enabled. """
        return self.stemmer.normalize(word) if self.conf.stem else word

    @staticmethod
    def _pairs(tagged: Tagged) -> List[TaggedToken]:
        if isinstance(tagged, str):
            return parse_markup(tagged)
        return list(tagged)

    def _count(self, tagged: Tagged, category: str) -> Optional[Counts]:
        if not valid_text(tagged):
            return None
        return count_matches(self._pairs(tagged), CATEGORIES[category],
                             self.stem)

    def get_words(self, text: str) -> Optional[Counts]:
        """
        Return as many nouns and noun phrases of the text as possible.
        Only nouns are returned if `longest_noun_phrase` is at most 1.
        """
        if not valid_text(text):
            return None
        tagged = self.tag(text)
        if self.conf.longest_noun_phrase <= 1:
            return self.get_nouns(tagged)
        return self.get_noun_phrases(tagged)

    def get_noun_phrases(self, tagged: Tagged) -> Optional[Counts]:
        """ All nouns and noun phrases of a tagged text. """
        if not valid_text(tagged):
            return None
        return noun_phrases(self._pairs(tagged),
                            self.conf.longest_noun_phrase,
                            self.conf.weight_noun_phrases, self.stem)

    def get_max_noun_phrases(self, tagged: Tagged) -> Optional[Counts]:
        """ Only the maximal noun phrases of a tagged text. """
        if not valid_text(tagged):
            return None
        return max_noun_phrases(self._pairs(tagged), self.stem)

    def get_proper_nouns(self, tagged: Tagged) -> Optional[Counts]:
        """
        Proper nouns and their frequencies. Multi-word names are found as
        a unit and absorb their acronyms.
        """
        if not valid_text(tagged):
            return None
        return proper_nouns(self._pairs(tagged), self.stem)

    def get_nouns(self, tagged: Tagged) -> Optional[Counts]:
        return self._count(tagged, "nouns")

    def get_verbs(self, tagged: Tagged) -> Optional[Counts]:
        """ Verbs of all kinds. """
        return self._count(tagged, "verbs")

    def get_infinitive_verbs(self, tagged: Tagged) -> Optional[Counts]:
        return self._count(tagged, "infinitive_verbs")

    def get_past_tense_verbs(self, tagged: Tagged) -> Optional[Counts]:
        return self._count(tagged, "past_tense_verbs")

    def get_gerund_verbs(self, tagged: Tagged) -> Optional[Counts]:
        return self._count(tagged, "gerund_verbs")

    def get_passive_verbs(self, tagged: Tagged) -> Optional[Counts]:
        return self._count(tagged, "passive_verbs")

    def get_base_present_verbs(self, tagged: Tagged) -> Optional[Counts]:
        return self._count(tagged, "base_present_verbs")

    def get_present_verbs(self, tagged: Tagged) -> Optional[Counts]:
        return self._count(tagged, "present_verbs")

    def get_adjectives(self, tagged: Tagged) -> Optional[Counts]:
        return self._count(tagged, "adjectives")

    def get_comparative_adjectives(self, tagged: Tagged) -> Optional[Counts]:
        return self._count(tagged, "comparative_adjectives")

    def get_superlative_adjectives(self, tagged: Tagged) -> Optional[Counts]:
        return self._count(tagged, "superlative_adjectives")

    def get_adverbs(self, tagged: Tagged) -> Optional[Counts]:
        return self._count(tagged, "adverbs")

    def get_interrogatives(self, tagged: Tagged) -> Optional[Counts]:
        return self._count(tagged, "interrogatives")

    get_question_parts = get_interrogatives

    def get_conjunctions(self, tagged: Tagged) -> Optional[Counts]:
        """ Conjunctions of all kinds, coordinating and subordinating. """
        return self._count(tagged, "conjunctions")
