# Detection
from .detection import LINK_PATTERN, Fragment, LinkDetector, find_links, parse

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook, names

__all__ = [
    # Detection
    "Fragment",
    "LINK_PATTERN",
    "LinkDetector",
    "find_links",
    "parse",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    "names",
]
