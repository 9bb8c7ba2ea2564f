from bs4 import BeautifulSoup

from engtagger.preprocess import Preprocessor

__all__ = ['BaseTransformer', 'HtmlTransformer']


class BaseTransformer(Preprocessor):
    """ Maps a document to a document. """

    def _preprocess(self, string: str) -> str:
        raise NotImplementedError


class HtmlTransformer(BaseTransformer):
    """ Removes all html tags from string. """
    name = "Parse html"

    def _preprocess(self, string: str) -> str:
        if not isinstance(string, str):
            raise ValueError(f"{self.name} expects a string")
        return BeautifulSoup(string, 'html.parser').get_text()
