""" This module provides the text processing steps that precede tagging.

Preprocessors work on a list of documents (or of token lists) and can be
chained with :class:`PreprocessorList`::

    >>> from engtagger import preprocess
    >>> pp = preprocess.PreprocessorList([preprocess.HtmlTransformer(),
    ...                                   preprocess.PunctTokenizer()])
    >>> pp(["<p>Isn't it <b>raining</b>?</p>"])
    [['Is', "n't", 'it', 'raining', '?']]

A single string can be processed directly with the tokenizer::

    >>> preprocess.PunctTokenizer().tokenize("I am 100.0% sure.")
    ['I', 'am', '100.0', '%', 'sure', '.']

"""
from .preprocess import *
from .tokenize import *
from .normalize import *
from .transform import *
