from leaderboard import db


class LeaderboardEntry(db.Model):
    """Best known record for one hash.

    ``value`` holds ``"<height> <blob>"``; ``version`` is bumped on every
    overwrite and is the token for conditional updates.
    """
    __tablename__ = 'leaderboard'
    key = db.Column(db.Text, primary_key=True)
    value = db.Column(db.Text, nullable=False)
    version = db.Column(db.Integer, nullable=False, default=1)

    def __repr__(self):
        return f'<LeaderboardEntry {self.key} v{self.version}>'
