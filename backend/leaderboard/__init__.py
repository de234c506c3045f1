from flask import Flask
from flask.cli import with_appcontext
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
import click
from config import Config

db = SQLAlchemy()
migrate = Migrate()

def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    # Origins, methods and headers come from the CORS_* config keys
    CORS(flask_app)

    from leaderboard.errors import register_error_handlers
    register_error_handlers(flask_app)

    # Import and register blueprints here
    from leaderboard.main import main
    flask_app.register_blueprint(main)

    from leaderboard.api.leaderboard import leaderboard_api
    flask_app.register_blueprint(leaderboard_api, url_prefix='/leaderboard')
    # Path the game clients were built against
    flask_app.register_blueprint(
        leaderboard_api,
        url_prefix='/.netlify/functions/leaderboard',
        name='netlify_leaderboard',
    )

    # Make sure the table is known to metadata for create_all / migrations
    from leaderboard import models  # noqa: F401

    @click.command('import-records')
    @click.argument('source', type=click.File('r'))
    @with_appcontext
    def import_records_command(source):
        """Submits "<hash> <height> <blob>" lines, keeping the best per hash."""
        from leaderboard.errors import LeaderboardError
        from leaderboard.services.scores import ScoreStore
        from leaderboard.services.scores.importer import import_rows

        store = ScoreStore(
            db.session,
            max_retries=flask_app.config.get('SUBMIT_MAX_RETRIES', 3),
            logger=flask_app.logger,
        )
        try:
            read, applied = import_rows(store, source)
        except ValueError as exc:
            raise click.ClickException(str(exc)) from exc
        except LeaderboardError as exc:
            raise click.ClickException(exc.message) from exc
        flask_app.logger.info(f"[import] read={read} applied={applied}")
        click.echo(f'Read {read} records, applied {applied}.')

    flask_app.cli.add_command(import_records_command)

    return flask_app
