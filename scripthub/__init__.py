"""
Flask application factory
Creates and configures the Flask app instance
"""

from flask import Flask, g, render_template, request
import logging
import os

logger = logging.getLogger(__name__)

PROJECT_ROOT = os.path.join(os.path.abspath(os.path.dirname(__file__)), '..')


def create_app(overrides=None):
    """Create and configure Flask application"""
    from scripthub import settings

    app = Flask(__name__,
                instance_path=PROJECT_ROOT,
                static_folder='../static',
                template_folder='../templates')

    # Load configuration
    app.config.from_object(settings.Settings)
    if overrides:
        app.config.update(overrides)

    # Setup logging
    setup_logging(app)

    # Middleware
    from scripthub.utils.middleware import MethodOverrideMiddleware
    app.wsgi_app = MethodOverrideMiddleware(app.wsgi_app)

    # Initialize database and services
    services = initialize_services(app)

    # Register blueprints
    register_blueprints(app, services)

    # Setup app context
    setup_context(app, services['catalog'])

    # Register CLI commands
    from scripthub import cli
    cli.register_commands(app)

    return app


def setup_logging(app):
    """Setup logging configuration"""
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=app.config.get('LOG_LEVEL', 'INFO')
    )
    logging.getLogger("werkzeug").setLevel(logging.INFO)


def initialize_services(app):
    """Open the database, run startup steps and build the services"""
    from scripthub.services.auth_service import AuthService
    from scripthub.utils.database import Database
    from scripthub.utils.db_schema import initialize_database

    database = Database(app.config['DB_FILE'])
    catalog, _ = initialize_database(
        database,
        default_categories=app.config.get('DEFAULT_CATEGORIES'),
        legacy_file=app.config.get('LEGACY_DB_FILE'),
    )
    auth = AuthService(app.config['ADMIN_USER'], app.config['ADMIN_PASS'])

    services = {'database': database, 'catalog': catalog, 'auth': auth}
    app.extensions['scripthub'] = services
    return services


def register_blueprints(app, services):
    """Register Flask blueprints"""
    # Import blueprints here to avoid circular imports
    from scripthub.routes import admin, auth, public

    app.register_blueprint(public.create_blueprint(services['catalog']))
    app.register_blueprint(auth.create_blueprint(services['auth']), url_prefix='/admin')
    app.register_blueprint(admin.create_blueprint(services['catalog']), url_prefix='/admin')


def setup_context(app, catalog):
    """Setup application context"""
    @app.before_request
    def load_categories():
        """Load the navigation categories once per request"""
        if request.endpoint == 'static':
            return
        try:
            g.categories = catalog.list_categories()
        except Exception as e:
            logger.warning(f"Could not load categories, rendering without them: {e}")
            g.categories = []

    @app.context_processor
    def inject_categories():
        return {'categories': g.get('categories', [])}

    # A known path with the wrong method is reported as not found too
    @app.errorhandler(405)
    @app.errorhandler(404)
    def not_found(error):
        return render_template('404.html', title='No encontrado'), 404
