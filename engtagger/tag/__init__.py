"""

A module for part-of-speech tagging of English text.

The tagger needs a lexicon; build one from source tables once and reuse it::

    >>> from engtagger.lexicon import Lexicon
    >>> from engtagger.tag import EngTagger
    >>> lexicon = Lexicon.install('path/to/sources')
    >>> tagger = EngTagger(lexicon)
    >>> tagger.tag("I woke up to the sound of pouring rain.")[:3]
    [('I', 'prp'), ('woke', 'vbd'), ('up', 'rb')]
    >>> tagger.add_tags("Pouring rain.")
    '<vbg>Pouring</vbg> <nn>rain</nn> <pp>.</pp>'

Tagged text can be searched for noun phrases and other categories::

    >>> tagger.get_noun_phrases(tagger.tag("the big fat cat"))
    {'big fat cat': 1, 'fat cat': 1, 'cat': 1}

"""

from .tagset import *
from .classify import *
from .markup import *
from .pos import *
