"""
Extraction of noun phrases and other word categories from tagged text.

All functions take a sequence of (word, tag) pairs and return a mapping
from the extracted text to its number of occurrences::

    >>> pairs = [("big", "jj"), ("fat", "jj"), ("cat", "nn")]
    >>> noun_phrases(pairs)
    {'big fat cat': 1, 'fat cat': 1, 'cat': 1}

"""
from .grammar import *
from .phrases import *
