import os

from Orange.misc.environ import data_dir_base

__all__ = ['lexicon_dir']


def lexicon_dir():
    """ Location where the compiled lexicon is stored. """
    dir_ = os.path.join(data_dir_base(), 'Orange', 'engtagger')
    # make sure folder exists before the lexicon is installed
    os.makedirs(dir_, exist_ok=True)
    return dir_
