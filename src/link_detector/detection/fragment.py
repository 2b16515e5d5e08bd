# src/link_detector/detection/fragment.py

from dataclasses import dataclass


@dataclass(frozen=True)
class Fragment:
    """A labeled span of some original text.

    Offsets follow Python slicing: ``start_index`` is inclusive,
    ``end_index`` is exclusive, both 0-based. ``value`` holds the
    substring itself, so a fragment stays meaningful after the original
    text is gone.

    Prefer the ``create_text`` / ``create_link`` factories, which validate
    the span against the original text.
    """

    is_link: bool
    start_index: int
    end_index: int
    value: str

    def __post_init__(self) -> None:
        if self.start_index < 0 or self.start_index > self.end_index:
            raise IndexError(
                f"Invalid fragment span. start {self.start_index}, "
                f"end {self.end_index}, length {len(self.value)}"
            )
        if len(self.value) != self.end_index - self.start_index:
            raise IndexError(
                f"Fragment value does not match its span. start {self.start_index}, "
                f"end {self.end_index}, length {len(self.value)}"
            )

    @classmethod
    def create_text(cls, text: str, start: int, end: int) -> "Fragment":
        """Create a fragment that represents plain text."""
        return cls._create(False, text, start, end)

    @classmethod
    def create_link(cls, text: str, start: int, end: int) -> "Fragment":
        """Create a fragment that represents a link."""
        return cls._create(True, text, start, end)

    @classmethod
    def _create(cls, is_link: bool, text: str, start: int, end: int) -> "Fragment":
        if text is None:
            raise ValueError("Argument 'text' cannot be None")
        length = len(text)
        if start < 0:
            raise IndexError(
                f"Argument 'start' cannot be less than zero. "
                f"start {start}, end {end}, length {length}"
            )
        if end > length:
            raise IndexError(
                f"Argument 'end' cannot be larger than the length of the text. "
                f"start {start}, end {end}, length {length}"
            )
        if start > end:
            raise IndexError(
                f"Argument 'start' cannot be larger than argument 'end'. "
                f"start {start}, end {end}, length {length}"
            )

        return cls(
            is_link=is_link,
            start_index=start,
            end_index=end,
            value=text[start:end],
        )

    def __len__(self) -> int:
        return self.end_index - self.start_index

    def __str__(self) -> str:
        return self.value
