from . import install

__all__ = ['install']
