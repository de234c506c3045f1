from flask import Blueprint, Response, current_app, request
from typing import Optional

from leaderboard import db
from leaderboard.errors import InvalidArgument
from leaderboard.services.scores import ScoreStore, parse_height


leaderboard_api = Blueprint('leaderboard_api', __name__)

COMMANDS = ('get', 'getrow', 'set')


def _get_parameter(name: str) -> Optional[str]:
    # parameter names are matched case-insensitively
    for key, value in request.args.items():
        if key.lower() == name:
            return value
    return None


def _text(body: str = '') -> Response:
    return Response(body, status=200, mimetype='text/plain')


def _store() -> ScoreStore:
    return ScoreStore(
        db.session,
        max_retries=current_app.config.get('SUBMIT_MAX_RETRIES', 3),
        logger=current_app.logger,
    )


@leaderboard_api.route('', methods=['GET', 'POST'])
def handle_command():
    command = (_get_parameter('command') or '').lower()
    if not command:
        raise InvalidArgument('Could not get command')
    if command not in COMMANDS:
        raise InvalidArgument(f'Could not parse command {command!r}')

    if command == 'get':
        # Deprecated; old clients still send it.
        return _text()

    hash = _get_parameter('hash')
    if not hash:
        raise InvalidArgument('Could not get hash')

    if command == 'getrow':
        record = _store().get_row(hash)
        return _text(record.to_row())

    height = parse_height(_get_parameter('height'))
    blob = _get_parameter('blob')
    _store().submit(hash, height, blob)
    return _text()
