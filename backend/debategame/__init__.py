from flask import Flask, jsonify, request
from flask_sqlalchemy import SQLAlchemy
from flask_cors import CORS
from flask_migrate import Migrate
from sqlalchemy.exc import SQLAlchemyError
import click
from debategame.config import Config

db = SQLAlchemy()
migrate = Migrate()


def create_app(config_class=Config):
    flask_app = Flask(__name__)
    flask_app.config.from_object(config_class)

    db.init_app(flask_app)
    migrate.init_app(flask_app, db)
    allowed_origins = [o.strip() for o in flask_app.config.get('CORS_ORIGINS', '').split(',') if o.strip()]
    CORS(flask_app, origins=allowed_origins)

    # Import and register blueprints here
    from debategame.main import main
    flask_app.register_blueprint(main)

    from debategame.api.debates import debates
    flask_app.register_blueprint(debates, url_prefix='/api/debates')

    from debategame.services.debates.errors import DebateError, Internal

    @flask_app.errorhandler(DebateError)
    def handle_debate_error(exc):
        return jsonify(exc.to_dict()), exc.status_code

    # Store failures outside the services' own try blocks (lazy loads, serialization)
    @flask_app.errorhandler(SQLAlchemyError)
    def handle_store_error(exc):
        db.session.rollback()
        flask_app.logger.error(f"[store] {request.method} {request.path} error={exc}")
        error = Internal('Error querying database')
        return jsonify(error.to_dict()), error.status_code

    from debategame.services.debates.judge import build_judge
    flask_app.extensions['argument_judge'] = build_judge(flask_app.config)

    @click.command('db-reset')
    def db_reset_command():
        """Drops, recreates, and seeds the database."""
        from debategame.models import User
        with flask_app.app_context():
            db.drop_all()
            db.create_all()

            # Seed users
            for username in ['alice', 'bob', 'carol']:
                db.session.add(User(username=username))

            db.session.commit()
            print('Database has been reset and seeded!')

    flask_app.cli.add_command(db_reset_command)

    return flask_app
