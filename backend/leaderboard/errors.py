from flask import jsonify


class LeaderboardError(Exception):
    """Base class for errors surfaced to the caller as a failed request."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidArgument(LeaderboardError):
    status_code = 400


class Conflict(LeaderboardError):
    status_code = 409


class StorageUnavailable(LeaderboardError):
    status_code = 503


def register_error_handlers(flask_app) -> None:
    @flask_app.errorhandler(LeaderboardError)
    def handle_leaderboard_error(exc: LeaderboardError):
        return jsonify({'error': exc.message}), exc.status_code
