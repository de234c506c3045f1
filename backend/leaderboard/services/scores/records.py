from dataclasses import dataclass
from typing import Optional

DEFAULT_HEIGHT = 0.0
DEFAULT_BLOB = '0'


@dataclass(frozen=True)
class ScoreRecord:
    hash: str
    height: float
    blob: str

    @classmethod
    def default(cls, hash: str) -> 'ScoreRecord':
        """Record reported for a hash nobody has submitted yet.

        Callers cannot tell it apart from a stored ``(0.0, "0")``.
        """
        return cls(hash=hash, height=DEFAULT_HEIGHT, blob=DEFAULT_BLOB)

    @classmethod
    def from_value(cls, hash: str, value: str) -> 'ScoreRecord':
        # the blob is everything after the first space, never split further
        height_text, _, blob = value.partition(' ')
        return cls(hash=hash, height=float(height_text), blob=blob)

    @classmethod
    def from_row(cls, row: str) -> 'ScoreRecord':
        """Parse a ``"<hash> <height> <blob>"`` line as served by ``getrow``.

        Fields are separated by any run of whitespace; the blob is the rest of
        the line.
        """
        parts = row.strip().split(None, 2)
        if len(parts) < 3:
            raise ValueError(f'expected "<hash> <height> <blob>", got {row!r}')
        hash, height_text, blob = parts
        return cls(hash=hash, height=float(height_text), blob=blob)

    def to_value(self) -> str:
        return f'{self.height} {self.blob}'

    def to_row(self) -> str:
        # A hash containing whitespace is served as-is and cannot be read back
        # by from_row; hashes are opaque and not validated beyond non-empty.
        return f'{self.hash} {self.height} {self.blob}'


def parse_height(raw: Optional[str]) -> float:
    """Lenient height parsing: anything missing or non-numeric counts as 0.0.

    ``"nan"`` parses to NaN and is kept. A NaN stored first is never replaced,
    since no height compares greater than it.
    """
    if raw is None:
        return DEFAULT_HEIGHT
    try:
        return float(raw)
    except (TypeError, ValueError):
        return DEFAULT_HEIGHT
