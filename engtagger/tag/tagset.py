"""
The closed set of part-of-speech tags used by the tagger.

Tags are short lowercase codes. Each code maps to a verbose name that is
derived from a human readable description::

    >>> explain_tag("nn")
    'noun'
    >>> explain_tag("vbn")
    'verb_pastorpassive_participle'

"""
import re

__all__ = ['TAGS', 'TAG_SET', 'SENTENCE_END', 'DEFAULT_TAG', 'SYMBOL',
           'NOUN_TAGS', 'PROPER_NOUN_TAGS', 'ADJECTIVE_TAGS', 'VERB_TAGS',
           'ADVERB_TAGS', 'INTERROGATIVE_TAGS', 'CONJUNCTION_TAGS',
           'MODIFIER_TAGS', 'OPEN_CLASS_PREFIXES', 'explain_tag',
           'is_open_class']

_DESCRIPTIONS = [
    ("CC", "Conjunction, coordinating"),
    ("CD", "Adjective, cardinal number"),
    ("DET", "Determiner"),
    ("EX", "Pronoun, existential there"),
    ("FW", "Foreign words"),
    ("IN", "Preposition / Conjunction"),
    ("JJ", "Adjective"),
    ("JJR", "Adjective, comparative"),
    ("JJS", "Adjective, superlative"),
    ("LS", "Symbol, list item"),
    ("MD", "Verb, modal"),
    ("NN", "Noun"),
    ("NNP", "Noun, proper"),
    ("NNPS", "Noun, proper, plural"),
    ("NNS", "Noun, plural"),
    ("PDT", "Determiner, prequalifier"),
    ("POS", "Possessive"),
    ("PRP", "Determiner, possessive second"),
    ("PRPS", "Determiner, possessive"),
    ("RB", "Adverb"),
    ("RBR", "Adverb, comparative"),
    ("RBS", "Adverb, superlative"),
    ("RP", "Adverb, particle"),
    ("SYM", "Symbol"),
    ("TO", "Preposition"),
    ("UH", "Interjection"),
    ("VB", "Verb, infinitive"),
    ("VBD", "Verb, past tense"),
    ("VBG", "Verb, gerund"),
    ("VBN", "Verb, past/passive participle"),
    ("VBP", "Verb, base present form"),
    ("VBZ", "Verb, present 3SG -s form"),
    ("WDT", "Determiner, question"),
    ("WP", "Pronoun, question"),
    ("WPS", "Determiner, possessive & question"),
    ("WRB", "Adverb, question"),
    ("PP", "Punctuation, sentence ender"),
    ("PPC", "Punctuation, comma"),
    ("PPD", "Punctuation, dollar sign"),
    ("PPL", "Punctuation, quotation mark left"),
    ("PPR", "Punctuation, quotation mark right"),
    ("PPS", "Punctuation, colon, semicolon, elipsis"),
    ("LRB", "Punctuation, left bracket"),
    ("RRB", "Punctuation, right bracket"),
]


def _verbose_name(description: str) -> str:
    name = re.sub(r"[.,'\-\s]+", "_", description.lower())
    return name.replace("&", "and").replace("/", "or")


TAGS = {code.lower(): _verbose_name(text) for code, text in _DESCRIPTIONS}
TAG_SET = frozenset(TAGS)

# the previous tag before the first word of a text
SENTENCE_END = "pp"
# assigned when the decoder finds no viable transition
DEFAULT_TAG = "nn"
SYMBOL = "sym"

NOUN_TAGS = frozenset(("nn", "nns", "nnp", "nnps"))
PROPER_NOUN_TAGS = frozenset(("nnp",))
ADJECTIVE_TAGS = frozenset(("jj", "jjr", "jjs"))
VERB_TAGS = frozenset(("vb", "vbd", "vbg", "vbn", "vbp", "vbz"))
ADVERB_TAGS = frozenset(("rb", "rbr", "rbs", "rp"))
INTERROGATIVE_TAGS = frozenset(("wrb", "wdt", "wp", "wps"))
CONJUNCTION_TAGS = frozenset(("cc", "in"))
# gerunds, adjectives and participles may precede nouns in a noun phrase
MODIFIER_TAGS = ADJECTIVE_TAGS | {"vbg", "vbn"}

OPEN_CLASS_PREFIXES = ("jj", "nn", "rb", "vb")


def explain_tag(tag) -> str:
    """ Convert an abbreviated tag into its verbose name, if there is one. """
    tag = str(tag).lower()
    return TAGS.get(tag, tag)


def is_open_class(tag: str) -> bool:
    return tag.startswith(OPEN_CLASS_PREFIXES)
