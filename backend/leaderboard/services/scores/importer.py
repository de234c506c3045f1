from typing import Iterable, Tuple

from .records import ScoreRecord
from .store import ScoreStore


def import_rows(store: ScoreStore, lines: Iterable[str]) -> Tuple[int, int]:
    """Submit every ``"<hash> <height> <blob>"`` line through ``store``.

    Blank lines are skipped. Returns ``(read, applied)``. A malformed line
    raises ``ValueError`` naming its line number before anything after it is
    submitted.
    """
    read = 0
    applied = 0
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            record = ScoreRecord.from_row(line)
        except ValueError as exc:
            raise ValueError(f'line {lineno}: {exc}') from exc
        read += 1
        if store.submit(record.hash, record.height, record.blob):
            applied += 1
    return read, applied
