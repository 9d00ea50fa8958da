"""Geo-Attend - Application Factory."""
import logging
import os
from flask import Flask, jsonify
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

# Initialize extensions
db = SQLAlchemy()
migrate = Migrate()
limiter = Limiter(key_func=get_remote_address)

def create_app(config_name: str = None) -> Flask:
    """Application factory pattern."""
    app = Flask(__name__)

    # Load configuration
    from geoattend.config import get_config
    config_class = get_config(config_name)
    app.config.from_object(config_class)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)

    # Configure CORS
    CORS(app, origins=app.config.get('CORS_ORIGINS', ["*"]))

    setup_logging(app)
    register_blueprints(app)
    register_error_handlers(app)
    setup_database(app)
    register_commands(app)

    @app.route('/health')
    def health_check():
        return jsonify({
            'status': 'healthy',
            'service': 'Geo-Attend',
            'version': '1.0.0'
        })

    return app

def register_blueprints(app: Flask) -> None:
    """Register all application blueprints."""
    from flask_swagger_ui import get_swaggerui_blueprint
    from geoattend.api.sessions import sessions_bp
    from geoattend.api.attendance import attendance_bp
    from geoattend.api.students import students_bp
    from geoattend.api.dashboard import dashboard_bp
    from geoattend.utils.swagger import SWAGGER_URL, API_URL, generate_swagger_spec

    app.register_blueprint(sessions_bp, url_prefix='/api/session')
    app.register_blueprint(attendance_bp, url_prefix='/api/attendance')
    app.register_blueprint(students_bp, url_prefix='/api/student')
    app.register_blueprint(dashboard_bp, url_prefix='/api/dashboard')

    @app.route(API_URL)
    def swagger_spec():
        """Serve Swagger/OpenAPI specification."""
        return jsonify(generate_swagger_spec())

    swaggerui_bp = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={'app_name': "Geo-Attend API"}
    )
    app.register_blueprint(swaggerui_bp, url_prefix=SWAGGER_URL)

def register_error_handlers(app: Flask) -> None:
    """Register error handlers."""
    from geoattend.utils.helpers import handle_error
    from geoattend.utils.exceptions import AttendanceError
    from werkzeug.exceptions import HTTPException

    @app.errorhandler(AttendanceError)
    def domain_error(error):
        return handle_error(error.message, error.status_code)

    @app.errorhandler(HTTPException)
    def handle_exception(e):
        return handle_error(e.description, e.code)

    @app.errorhandler(500)
    def internal_error(error):
        db.session.rollback()
        return handle_error('Internal Server Error', 500)

def setup_logging(app: Flask) -> None:
    """Setup application logging."""
    if not app.debug and not app.testing:
        log_file = app.config.get('LOG_FILE', 'logs/app.log')
        log_dir = os.path.dirname(log_file)
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)

        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(
            '%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'
        ))
        level = getattr(logging, app.config.get('LOG_LEVEL', 'INFO'))
        file_handler.setLevel(level)

        # app.logger is the "geoattend" logger; service loggers propagate to it
        package_logger = logging.getLogger('geoattend')
        package_logger.addHandler(file_handler)
        package_logger.setLevel(level)
        app.logger.info('Geo-Attend startup')

def setup_database(app: Flask) -> None:
    """Import models so their tables are registered on the metadata."""
    with app.app_context():
        from geoattend.models import Student, AttendanceSession, AttendanceRecord  # noqa: F401

def register_commands(app: Flask) -> None:
    """Register CLI commands."""
    import click

    @app.cli.command('init-db')
    @click.option('--drop', is_flag=True, help='Drop existing tables')
    def init_db(drop):
        """Initialize the database."""
        if drop:
            db.drop_all()
            click.echo('Dropped all tables.')

        db.create_all()
        click.echo('Created all tables.')

    @app.cli.command('import-roster')
    @click.argument('path', type=click.Path(exists=True, dir_okay=False))
    def import_roster(path):
        """Import students from a CSV file with nim and name columns."""
        import pandas as pd
        from geoattend.services.student_service import StudentService
        from geoattend.utils.exceptions import InvalidRequest

        df = pd.read_csv(path, dtype=str)
        try:
            summary = StudentService(db.session).import_roster(df)
        except InvalidRequest as e:
            raise click.ClickException(e.message)
        click.echo(f"Imported {summary['created']} students, skipped {summary['skipped']}.")
