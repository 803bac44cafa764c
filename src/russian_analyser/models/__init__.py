from .token import Token, ALPHANUM, NUM
from .version import Version

__all__ = [
    "Token",
    "ALPHANUM",
    "NUM",
    "Version",
]
