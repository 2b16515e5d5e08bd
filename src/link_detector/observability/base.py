import logging
from typing import Protocol


class MetricsHook(Protocol):
    """Receives detection timings, fragment and link counts, and input sizes.

    Metric names are defined in ``link_detector.observability.names``.
    """

    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    """Default hook. Discards everything."""

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass


class LoggingMetricsHook:
    """Writes every metric as a log record.

    Useful when no metrics backend is wired up but the numbers are still
    wanted, e.g. while debugging link detection on a batch of messages.
    """

    def __init__(
        self,
        logger: logging.Logger | None = None,
        level: int = logging.DEBUG,
    ) -> None:
        self._logger = logger or logging.getLogger(__name__)
        self._level = level

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        self._logger.log(
            self._level, "metric latency %s=%.3fms labels=%s", name, value_ms, labels
        )

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        self._logger.log(
            self._level, "metric counter %s+=%d labels=%s", name, value, labels
        )

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        self._logger.log(
            self._level, "metric gauge %s=%s labels=%s", name, value, labels
        )
