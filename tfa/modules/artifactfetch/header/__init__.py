from .parser import HeaderParser

__all__ = ["HeaderParser"]
