from functools import lru_cache, partial
from typing import List, Union

from nltk import stem

from engtagger.preprocess import Preprocessor

__all__ = ['BaseNormalizer', 'PorterStemmer']


class BaseNormalizer(Preprocessor):
    """ A generic normalizer class.
    You should either overwrite `normalize` method or provide a custom
    normalizer.
    """
    normalizer = NotImplemented

    def __init__(self, cache_size: int = 100_000):
        # cache already normalized strings to speedup normalization
        self.cache_size = cache_size
        self._cached = lru_cache(maxsize=cache_size)(self.normalizer)

    def __call__(self, data: List, callback=None) -> List:
        """ Normalizes every token of every token list. """
        return super().__call__(data, callback)

    def _preprocess(self, tokens: Union[str, List[str]]) \
            -> Union[str, List[str]]:
        if isinstance(tokens, str):
            return self._cached(tokens)
        if isinstance(tokens, (list, tuple)):
            return [self._cached(t) for t in tokens]
        raise ValueError(f"{self.name} expects a string or a list of strings")

    def normalize(self, token: str) -> str:
        """ Normalizes token to canonical form. """
        return self._preprocess(token)

    def __getstate__(self):
        d = self.__dict__.copy()
        # since cache can be quite big and is not picklable, drop it
        d.pop("_cached")
        return d

    def __setstate__(self, state):
        self.__dict__.update(state)
        self._cached = lru_cache(maxsize=self.cache_size)(self.normalizer)


class PorterStemmer(BaseNormalizer):
    """ Porter, 1980, with Martin Porter's own extensions; keeps case. """
    name = 'Porter Stemmer'
    normalizer = partial(
        stem.PorterStemmer(mode=stem.PorterStemmer.MARTIN_EXTENSIONS).stem,
        to_lowercase=False)
