from flask import Flask, jsonify, request, current_app
from flask_sqlalchemy import SQLAlchemy
from dotenv import load_dotenv

# Load environment variables early so config is available for blueprint creation
load_dotenv()

from academia.config import config

db = SQLAlchemy()


def create_app() -> Flask:
    """
    Application factory for the Flask app.
    Loads environment variables, configures the database,
    and registers blueprints.
    """
    # Re-initialize config to ensure latest .env values are loaded
    from academia.config import Config
    global config
    config = Config()

    # Validate configuration
    config.validate()

    app = Flask(__name__)

    # Load configuration from config module
    app.config["SECRET_KEY"] = config.SECRET_KEY
    db_uri = config.SQLALCHEMY_DATABASE_URI
    app.config["SQLALCHEMY_DATABASE_URI"] = db_uri
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = config.SQLALCHEMY_TRACK_MODIFICATIONS
    app.config["SQLALCHEMY_ECHO"] = config.SQLALCHEMY_ECHO
    # Connection pooling only applies to the MySQL server deployment
    if db_uri.startswith("mysql"):
        app.config["SQLALCHEMY_ENGINE_OPTIONS"] = {
            "pool_size": 10,
            "pool_recycle": 3600,
            "pool_pre_ping": True,
            "max_overflow": 20,
        }
    app.config["UPLOAD_DIR"] = config.UPLOAD_DIR

    from academia.quiz.settings import GenerationSettings
    app.config["QUIZ_SETTINGS"] = GenerationSettings.from_config(config)

    app.logger.setLevel(config.LOG_LEVEL)

    # Initialize extensions
    db.init_app(app)

    @app.route("/api/health")
    def health():
        return jsonify({'success': True, 'status': 'ok'}), 200

    # Register quiz blueprint
    from academia.quiz import quiz_bp
    app.register_blueprint(quiz_bp)

    # Custom error handler for API routes to return JSON instead of HTML
    @app.errorhandler(404)
    def handle_404(e):
        """Handle 404 errors - return JSON for API routes, plain text for others."""
        path = request.path
        method = request.method
        current_app.logger.warning(f"404 error: {method} {path}")
        if '/api/' in path:
            return jsonify({
                'success': False,
                'error': f'Route not found: {method} {path}',
                'path': path,
                'method': method
            }), 404
        return f"Page not found: {path}", 404

    @app.errorhandler(405)
    def handle_405(e):
        """Handle 405 Method Not Allowed - return JSON for API routes."""
        path = request.path
        method = request.method
        current_app.logger.warning(f"405 error: {method} {path}")
        if '/api/' in path:
            return jsonify({
                'success': False,
                'error': f'Method not allowed: {method} {path}',
                'path': path,
                'method': method
            }), 405
        return e

    # Create tables if they do not exist
    with app.app_context():
        from academia.records import models  # noqa: F401
        db.create_all()

    return app
