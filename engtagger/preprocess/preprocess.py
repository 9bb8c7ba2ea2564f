from typing import Union, List, Callable

from Orange.util import dummy_callback, wrap_callback

__all__ = ['Preprocessor', 'PreprocessorList']


class Preprocessor:
    name = NotImplemented

    def __call__(self, data: List, callback: Callable = None) -> List:
        """
        Preprocess a list of documents or token lists. Invokes
        `_preprocess` on every item.

        :param data: list of documents or list of token lists
        :param callback: progress callback function
        :return: list
            Preprocessed items.
        """
        if not isinstance(data, (list, tuple)):
            raise ValueError(f"{self.name} expects a list, got "
                             f"{type(data).__name__}")
        if callback is None:
            callback = dummy_callback
        result, n = [], len(data)
        for i, item in enumerate(data):
            callback(i / n)
            result.append(self._preprocess(item))
        return result

    def __str__(self):
        return self.name

    def _preprocess(self, _: Union[str, List[str]]) -> Union[str, List[str]]:
        """ This method should be implemented when subclassed. It performs
        preprocessing operation on a document or token(s).
        """
        raise NotImplementedError


class PreprocessorList:
    """ Store a list of preprocessors and on call apply them to the data. """

    def __init__(self, preprocessors: List):
        self.preprocessors = preprocessors

    def __call__(self, data: List, callback: Callable = None) -> List:
        """
        Applies a list of preprocessors to the data.

        :param data: list of documents
        :param callback: progress callback function
        :return: list
            Preprocessed data.
        """
        if callback is None:
            callback = dummy_callback
        n_pps = len(list(self.preprocessors))
        for i, pp in enumerate(self.preprocessors):
            start = i / n_pps
            cb = wrap_callback(callback, start=start, end=start + 1 / n_pps)
            data = pp(data, cb)
        callback(1)
        return data
