import re
from typing import Iterator, List

from nltk.tokenize.api import TokenizerI

from engtagger.preprocess import Preprocessor

__all__ = ['EnglishTokenizer', 'SentenceSplitter', 'BaseTokenizer',
           'PunctTokenizer', 'BASE_TOKENIZER']


# fmt: off
PEOPLE = ["jr", "mr", "ms", "mrs", "dr", "prof", "esq", "sr", "sen", "sens",
          "rep", "reps", "gov", "attys", "supt", "det", "mssrs", "rev"]
ARMY = ["col", "gen", "lt", "cmdr", "adm", "capt", "sgt", "cpl", "maj", "brig"]
INSTITUTIONS = ["dept", "univ", "assn", "bros", "ph.d"]
PLACES = ["arc", "al", "ave", "blvd", "bld", "cl", "ct", "cres", "exp", "expy",
          "dist", "mt", "mtn", "ft", "fy", "fwy", "hwy", "hway", "la", "pde",
          "pd", "plz", "pl", "rd", "st", "tce"]
COMPANIES = ["mfg", "inc", "ltd", "co", "corp"]
STATES = ["ala", "ariz", "ark", "cal", "calif", "colo", "col", "conn", "del",
          "fed", "fla", "ga", "ida", "id", "ill", "ind", "ia", "kans", "kan",
          "ken", "ky", "la", "me", "md", "is", "mass", "mich", "minn", "miss",
          "mo", "mont", "neb", "nebr", "nev", "mex", "okla", "ok", "ore",
          "penna", "penn", "pa", "dak", "tenn", "tex", "ut", "vt", "va", "wash",
          "wis", "wisc", "wy", "wyo", "usafa", "alta", "man", "ont", "que",
          "sask", "yuk"]
MONTHS = ["jan", "feb", "mar", "apr", "may", "jun", "jul", "aug", "sep", "sept",
          "oct", "nov", "dec"]
MISC = ["vs", "etc", "no", "esp"]
# fmt: on

ABBREVIATIONS = frozenset(PEOPLE + ARMY + INSTITUTIONS + PLACES + COMPANIES
                          + STATES + MONTHS + MISC)


class SentenceSplitter:
    """
    Decide which trailing periods end a sentence.

    A period is split off a word when the next token starts with a capital
    letter or punctuation, unless the word is a known abbreviation, a
    single letter (Alfred E. Sloan) or a letter-dot chain (U.S.A.).
    """
    abbreviations = ABBREVIATIONS

    _period_word = re.compile(r"\A(.+)\.\Z")
    _sentence_start = re.compile(r"[A-Z]|\W")
    _single_letter = re.compile(r"\A[a-z]\Z", re.IGNORECASE)
    _letter_dots = re.compile(r"[a-z](?:\.[a-z])+\Z", re.IGNORECASE)
    _final_period = re.compile(r"\A(.*\w)\.\Z")

    def split(self, tokens: List[str]) -> List[str]:
        words = []
        for token, next_ in zip(tokens, tokens[1:] + [None]):
            match = self._period_word.match(token)
            if next_ is not None and match \
                    and self._sentence_start.match(next_):
                word = match.group(1)
                if not self._keeps_period(word):
                    words.extend((word, "."))
                    continue
            words.append(token)

        # the last word of a text always ends its sentence
        if words:
            match = self._final_period.match(words[-1])
            if match:
                words[-1:] = [match.group(1), "."]
        return words

    def _keeps_period(self, word: str) -> bool:
        return word.lower() in self.abbreviations \
            or self._single_letter.match(word) is not None \
            or self._letter_dots.search(word) is not None


# (pattern, replacement) pairs, applied in order to a whitespace-free fragment
_QUOTES = [
    # left quotes
    (re.compile(r"`(?!`)(?=.*\w)"), "` "),
    (re.compile(r'"(?=.*\w)'), " `` "),
    (re.compile(r"(\W|^)'(?=.*\w)"), lambda m: m.group(1) + " ` "),
    # remaining quotes are right quotes
    (re.compile(r'"'), " '' "),
    (re.compile(r"(\w)'(?!')(?=\W|$)"), r"\1 ' "),
]
_PUNCTUATION = [
    (re.compile(r"--+"), " - "),
    # commas inside numbers stay
    (re.compile(r",(?!\d)"), " , "),
    (re.compile(r":"), " : "),
    (re.compile(r"(\.\.\.+)"), r" \1 "),
    (re.compile(r"([(\[{}\])])"), r" \1 "),
    (re.compile(r"([!?#$%;~|])"), r" \1 "),
]
_CONTRACTIONS = [
    (re.compile(r"([A-Za-z])'([dms])\b"), r"\1 '\2"),
    (re.compile(r"n't\b"), " n't"),
    (re.compile(r"'(ve|ll|re)\b"), r" '\1"),
]


class EnglishTokenizer(TokenizerI):
    """
    Separate punctuation from words. Trailing periods are resolved by
    `SentenceSplitter` once the whole text is tokenized.
    """
    _word = re.compile(r"\A\w+\Z")
    _garbage = re.compile(r"\W{10,}")

    def __init__(self, splitter: SentenceSplitter = None):
        self.splitter = splitter or SentenceSplitter()

    def tokenize(self, text: str) -> List[str]:
        return self.splitter.split(list(self.iter_tokens(text)))

    def iter_tokens(self, text: str) -> Iterator[str]:
        """ Tokens of `text` before sentence boundaries are resolved. """
        for fragment in text.split():
            yield from self.split_punct(fragment)

    def split_punct(self, text: str) -> List[str]:
        if self._word.match(text):
            return [text]

        text = self._garbage.sub(" ", text)
        for pattern, repl in _QUOTES + _PUNCTUATION + _CONTRACTIONS:
            text = pattern.sub(repl, text)
        return text.split()


class BaseTokenizer(Preprocessor):
    tokenizer = NotImplemented

    def _preprocess(self, string: str) -> List[str]:
        if not isinstance(string, str):
            raise ValueError(f"{self.name} expects a string")
        return list(filter(lambda x: x != '', self.tokenizer.tokenize(string)))

    def tokenize(self, string: str) -> List[str]:
        return self._preprocess(string)


class PunctTokenizer(BaseTokenizer):
    """ Split by words and punctuation, resolving sentence ending periods. """
    tokenizer = EnglishTokenizer()
    name = 'English Word & Punctuation'


BASE_TOKENIZER = PunctTokenizer()
