from .detector import LinkDetector, find_links, parse
from .fragment import Fragment
from .patterns import LINK_PATTERN

__all__ = [
    "Fragment",
    "LINK_PATTERN",
    "LinkDetector",
    "find_links",
    "parse",
]
