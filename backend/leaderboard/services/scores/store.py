import logging
from typing import Optional, Tuple

from sqlalchemy import insert, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from leaderboard.errors import Conflict, InvalidArgument, StorageUnavailable
from leaderboard.models import LeaderboardEntry
from .records import DEFAULT_BLOB, ScoreRecord


def _require_hash(hash: Optional[str]) -> None:
    if not hash:
        raise InvalidArgument('Could not get hash')


class ScoreStore:
    """Keeps the best ``(height, blob)`` seen for each hash.

    Nothing is cached in-process: every call reads the database through the
    given session. Writes are conditional on the row ``version`` read in the
    same cycle, so two concurrent submits for one hash cannot both overwrite
    based on the same stale value; the loser re-reads and compares again.
    """

    def __init__(self, session, max_retries: int = 3, logger: Optional[logging.Logger] = None):
        self.session = session
        self.max_retries = max(1, int(max_retries))
        self.logger = logger or logging.getLogger(__name__)

    def get_row(self, hash: str) -> ScoreRecord:
        _require_hash(hash)
        try:
            current = self._read(hash)
        except SQLAlchemyError as exc:
            self._storage_failed('read', hash, exc)
        if current is None:
            return ScoreRecord.default(hash)
        value, _ = current
        return ScoreRecord.from_value(hash, value)

    def submit(self, hash: str, height: float, blob: Optional[str] = None) -> bool:
        """Store ``(height, blob)`` if ``height`` beats the stored height.

        Equal heights keep the earlier record. Returns whether the submitted
        record was written.
        """
        _require_hash(hash)
        candidate = ScoreRecord(
            hash=hash,
            height=float(height),
            blob=DEFAULT_BLOB if blob is None else blob,
        )
        for attempt in range(1, self.max_retries + 1):
            try:
                applied = self._try_submit(candidate)
            except SQLAlchemyError as exc:
                self._storage_failed('write', hash, exc)
            if applied is not None:
                self.logger.info(f"[submit] hash={hash} height={candidate.height} applied={applied}")
                return applied
            self.session.rollback()
            self.logger.warning(f"[conflict] hash={hash} attempt={attempt}/{self.max_retries} lost to a concurrent write")
        raise Conflict(f'Could not update {hash} after {self.max_retries} attempts')

    def _read(self, hash: str) -> Optional[Tuple[str, int]]:
        row = self.session.execute(
            select(LeaderboardEntry.value, LeaderboardEntry.version).where(LeaderboardEntry.key == hash)
        ).first()
        if row is None:
            return None
        return row.value, row.version

    def _try_submit(self, candidate: ScoreRecord) -> Optional[bool]:
        """One read/compare/write cycle; ``None`` means another writer got in between."""
        current = self._read(candidate.hash)
        if current is None:
            try:
                self.session.execute(
                    insert(LeaderboardEntry).values(key=candidate.hash, value=candidate.to_value(), version=1)
                )
                self.session.commit()
            except IntegrityError:
                return None
            return True

        value, version = current
        stored = ScoreRecord.from_value(candidate.hash, value)
        if not candidate.height > stored.height:
            return False

        result = self.session.execute(
            update(LeaderboardEntry)
            .where(LeaderboardEntry.key == candidate.hash, LeaderboardEntry.version == version)
            .values(value=candidate.to_value(), version=version + 1)
        )
        if result.rowcount != 1:
            return None
        self.session.commit()
        return True

    def _storage_failed(self, action: str, hash: str, exc: Exception):
        self.session.rollback()
        self.logger.error(f"[storage] {action} failed hash={hash}: {exc}")
        raise StorageUnavailable(f'Could not {action} leaderboard') from exc
