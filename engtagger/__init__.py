"""
English part-of-speech tagger with noun phrase extraction.

    >>> from engtagger import EngTagger
    >>> tagger = EngTagger()
    >>> tagger.get_readable("I woke up to the sound of pouring rain.")
    'I/PRP woke/VBD up/RB to/TO the/DET sound/NN of/IN pouring/VBG rain/NN ./PP'

"""
# the tagger must be imported before the extractors it uses
from .tag import EngTagger, TaggerConfig, explain_tag
from .lexicon import Lexicon, LexiconNotFound

from .version import git_revision as __git_revision__
from .version import version as __version__
