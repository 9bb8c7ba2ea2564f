"""
Probability tables used by the tagger.

A :class:`Lexicon` holds two read-only tables:

* emissions - a word (case sensitive) mapped to tag weights, e.g.
  ``{"rain": {"nn": 12.0, "vb": 3.0}}``
* transitions - a previous tag mapped to next-tag probabilities, e.g.
  ``{"det": {"jj": 0.2, "nn": 0.5}}``

The tables are built from line oriented source files, one entry per line::

    det: { jj: 0.2, nn: 0.5, vb: 0.0002 }
    "'s": { pos: 81, vbz: 3 }

and persisted with pickle so that later runs load quickly::

    >>> Lexicon.install('path/to/sources')   # once
    >>> lexicon = Lexicon.load()

"""
import logging
import os
import pickle
import re
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from Orange.data.io import detect_encoding

from engtagger.misc import lexicon_dir

__all__ = ['Lexicon', 'LexiconNotFound', 'read_table', 'parse_line',
           'TAG_LEX', 'WORD_LEX', 'UNKNOWN_LEX', 'WORD_FILE', 'TAG_FILE']

log = logging.getLogger(__name__)

TAG_LEX = "tags.yml"
WORD_LEX = "words.yml"
UNKNOWN_LEX = "unknown.yml"
WORD_FILE = "pos_words.pickle"
TAG_FILE = "pos_tags.pickle"

Table = Dict[str, Dict[str, float]]

_LINE = re.compile(r'\A"?([^{"]+)"?: \{ (.*) \}')
_ITEM = re.compile(r'([^:]+):\s*(.+)')
_EMPTY = MappingProxyType({})


class LexiconNotFound(FileNotFoundError):
    pass


def parse_line(line: str) -> Optional[Tuple[str, Dict[str, float]]]:
    """
    Parse one ``key: { tag: number, ... }`` line.

    Returns
    -------
    A pair of the key and its tag weights or None when the line is malformed.
    """
    match = _LINE.match(line)
    if match is None:
        return None
    key, data = match.groups()
    pairs = {}
    for item in re.split(r",\s+", data):
        m = _ITEM.match(item)
        if m is None:
            return None
        try:
            pairs[m.group(1).strip()] = float(m.group(2))
        except ValueError:
            return None
    return key, pairs


def read_table(path: str) -> Table:
    """ Read a source table, skipping the lines that cannot be parsed. """
    if not os.path.exists(path):
        raise LexiconNotFound(path)

    for encoding in ('utf-8', None, detect_encoding(path)):
        try:
            with open(path, encoding=encoding) as f:
                lines = f.readlines()
            break
        except UnicodeDecodeError:
            continue
    else:
        # No encoding worked, raise
        raise UnicodeError("Couldn't determine file encoding")

    table, skipped = {}, 0
    for line in lines:
        parsed = parse_line(line)
        if parsed is None:
            skipped += 1
            continue
        key, pairs = parsed
        table[key] = pairs
    log.debug("Read %d entries from %s (%d lines skipped)",
              len(table), path, skipped)
    return table


class Lexicon:
    """ Read-only emission and transition tables. """

    def __init__(self, words: Table = None, transitions: Table = None):
        self.__words = {w: MappingProxyType(dict(t))
                        for w, t in (words or {}).items()}
        self.__transitions = {t: MappingProxyType(dict(n))
                              for t, n in (transitions or {}).items()}

    @property
    def words(self) -> Mapping[str, Mapping[str, float]]:
        return MappingProxyType(self.__words)

    @property
    def transitions(self) -> Mapping[str, Mapping[str, float]]:
        return MappingProxyType(self.__transitions)

    def __contains__(self, word: str) -> bool:
        return word in self.__words

    def __len__(self):
        return len(self.__words)

    def __bool__(self):
        return bool(self.__words) and bool(self.__transitions)

    def emissions(self, word: str) -> Mapping[str, float]:
        """ Tag weights of the word; empty if the word was never seen. """
        return self.__words.get(word, _EMPTY)

    def successors(self, tag: str) -> Mapping[str, float]:
        """ Probabilities of tags following the tag, in stored order. """
        return self.__transitions.get(tag, _EMPTY)

    def __getstate__(self):
        # mappingproxy cannot be pickled
        return ({w: dict(t) for w, t in self.__words.items()},
                {t: dict(n) for t, n in self.__transitions.items()})

    def __setstate__(self, state):
        self.__init__(*state)

    @classmethod
    def from_source(cls, source_dir: str, tag_lex: str = TAG_LEX,
                    word_lex: str = WORD_LEX,
                    unknown_lex: str = UNKNOWN_LEX) -> "Lexicon":
        """ Build the tables from the source files in `source_dir`. """
        transitions = read_table(os.path.join(source_dir, tag_lex))
        words = read_table(os.path.join(source_dir, word_lex))
        words.update(read_table(os.path.join(source_dir, unknown_lex)))
        return cls(words, transitions)

    @classmethod
    def install(cls, source_dir: str, word_path: str = None,
                tag_path: str = None, **kwargs) -> "Lexicon":
        """
        Build the tables from source files and store them for :meth:`load`.

        Parameters
        ----------
        source_dir
            Directory with the source tables.
        word_path, tag_path
            Where to store the compiled tables; defaults to the data
            directory.
        kwargs
            Source file names, see :meth:`from_source`.

        Returns
        -------
        The installed lexicon.
        """
        word_path, tag_path = _default_paths(word_path, tag_path)
        log.info("Creating part-of-speech lexicon from %s", source_dir)
        lexicon = cls.from_source(source_dir, **kwargs)
        words, transitions = lexicon.__getstate__()
        with open(word_path, 'wb') as f:
            pickle.dump(words, f)
        with open(tag_path, 'wb') as f:
            pickle.dump(transitions, f)
        log.info("Stored lexicon with %d words and %d tags",
                 len(words), len(transitions))
        return lexicon

    @classmethod
    def read(cls, word_path: str = None, tag_path: str = None) -> "Lexicon":
        """ Load compiled tables, raise LexiconNotFound when missing. """
        word_path, tag_path = _default_paths(word_path, tag_path)
        for path in (word_path, tag_path):
            if not os.path.exists(path):
                raise LexiconNotFound(path)
        with open(word_path, 'rb') as f:
            words = pickle.load(f)
        with open(tag_path, 'rb') as f:
            transitions = pickle.load(f)
        return cls(words, transitions)

    @classmethod
    def load(cls, word_path: str = None, tag_path: str = None) -> "Lexicon":
        """ Load compiled tables; an empty lexicon when they are unusable. """
        try:
            return cls.read(word_path, tag_path)
        except LexiconNotFound as e:
            log.warning("Couldn't locate POS lexicon (%s), using an empty "
                        "one", e)
        except (OSError, pickle.UnpicklingError, EOFError) as e:
            log.warning("Couldn't read POS lexicon: %s", e)
        return cls()


def _default_paths(word_path, tag_path):
    if word_path is None or tag_path is None:
        dir_ = lexicon_dir()
        word_path = word_path or os.path.join(dir_, WORD_FILE)
        tag_path = tag_path or os.path.join(dir_, TAG_FILE)
    return word_path, tag_path
