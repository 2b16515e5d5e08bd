# src/link_detector/detection/detector.py

import logging
from functools import cache
from time import monotonic

from link_detector.observability import names
from link_detector.observability.base import MetricsHook, NoOpMetricsHook

from .fragment import Fragment
from .patterns import LINK_PATTERN

logger = logging.getLogger(__name__)


class LinkDetector:
    """Splits text into fragments that either are or are not links.

    Stateless. Safe to share between threads.
    """

    def __init__(self, metrics_hook: MetricsHook = NoOpMetricsHook()) -> None:
        self.metrics_hook = metrics_hook
        logger.info(
            "Initialized LinkDetector with metrics_hook=%s",
            type(metrics_hook).__name__,
        )

    def parse(self, text: str) -> list[Fragment]:
        """
        Split ``text`` into link and text fragments.

        Concatenating the values of the returned fragments, in order,
        reproduces ``text`` exactly. An empty string yields an empty list.
        """
        if text is None:
            raise ValueError("Argument 'text' cannot be None")
        if not text:
            return []

        start = monotonic()
        fragments: list[Fragment] = []
        links = 0
        needle = 0

        for match in LINK_PATTERN.finditer(text):
            # Text leading up to the match
            if match.start() > needle:
                fragments.append(Fragment.create_text(text, needle, match.start()))

            fragments.append(Fragment.create_link(text, match.start(), match.end()))
            links += 1
            needle = match.end()

        # Text after the last match
        if needle < len(text):
            fragments.append(Fragment.create_text(text, needle, len(text)))

        logger.debug(
            "Parsed text: length=%d, fragments=%d, links=%d",
            len(text),
            len(fragments),
            links,
        )

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.DETECTION_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.DETECTION_REQUESTS_TOTAL)
        self.metrics_hook.increment(names.DETECTION_FRAGMENTS_CREATED, len(fragments))
        self.metrics_hook.increment(names.DETECTION_LINKS_FOUND, links)
        self.metrics_hook.record_gauge(names.DETECTION_INPUT_LENGTH, len(text))
        return fragments

    def find_links(self, text: str) -> list[Fragment]:
        return [fragment for fragment in self.parse(text) if fragment.is_link]


@cache
def _default_detector() -> LinkDetector:
    return LinkDetector()


def parse(text: str) -> list[Fragment]:
    return _default_detector().parse(text)


def find_links(text: str) -> list[Fragment]:
    return _default_detector().find_links(text)
