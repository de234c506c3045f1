"""Score domain services: the best-record store and its text formats.

HTTP routes and CLI commands build a ``ScoreStore`` per call and go through
it; nothing here knows about requests.
"""

from .records import ScoreRecord, parse_height
from .store import ScoreStore

__all__ = ['ScoreRecord', 'ScoreStore', 'parse_height']
