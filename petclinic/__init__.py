"""
Flask Application Factory

This module implements the application factory pattern for creating
Flask application instances with different configurations.
"""

import logging
import os
from collections.abc import Mapping

from flask import Flask, render_template

from petclinic.config import config
from petclinic.extensions import csrf, db, migrate


def create_app(config_name='default', overrides=None):
    """
    Application factory function

    Args:
        config_name (str | Mapping): Configuration name ('development',
            'production', 'testing'). A mapping is taken as overrides on
            top of the testing configuration.
        overrides (Mapping): Extra settings applied after the config class.

    Returns:
        Flask: Configured Flask application instance
    """
    if isinstance(config_name, Mapping):
        overrides = {**config_name, **(overrides or {})}
        config_name = 'testing'

    # Normalize config name
    config_name = (config_name or 'default').lower()

    app = Flask(__name__)

    # Instantiate the config object so @property values (like
    # ProductionConfig.SQLALCHEMY_DATABASE_URI) are evaluated.
    cfg = config.get(config_name) or config['default']
    app.config.from_object(cfg())
    if overrides:
        app.config.update(overrides)

    configure_logging(app)

    if config_name == 'production':
        if not app.config.get('SECRET_KEY'):
            app.logger.error('Production requires SECRET_KEY to be set via environment variable')
            raise RuntimeError('Missing SECRET_KEY in production')
        db_uri = app.config.get('SQLALCHEMY_DATABASE_URI')
        if not db_uri:
            app.logger.error('Production requires DATABASE_URL (SQLALCHEMY_DATABASE_URI) to be set')
            raise RuntimeError('Missing DATABASE_URL in production')
    elif not app.config.get('SECRET_KEY'):
        app.config['SECRET_KEY'] = os.urandom(32)
        app.logger.warning('SECRET_KEY was missing; generated an ephemeral key for this process.')

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    csrf.init_app(app)

    register_blueprints(app)
    register_error_handlers(app)
    register_shell_context(app)
    register_cli_commands(app)

    @app.teardown_request
    def _cleanup_sessions(exc):
        if exc is not None:
            try:
                db.session.rollback()
            except Exception as rollback_exc:
                app.logger.error('Rollback during teardown failed: %s', rollback_exc, exc_info=True)

    app.logger.info('PetClinic application created with config: %s', config_name)
    return app


def configure_logging(app):
    """Apply LOG_LEVEL to the Flask logger."""
    level = logging.getLevelName(str(app.config.get('LOG_LEVEL', 'INFO')).upper())
    if not isinstance(level, int):
        level = logging.INFO
    app.logger.setLevel(level)


def register_blueprints(app):
    """Register all application blueprints"""
    from petclinic.routes.main import main_bp
    from petclinic.routes.health import health_bp
    from petclinic.blueprints.owners import owners_bp
    from petclinic.blueprints.vets import vets_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(health_bp)  # No prefix - accessible at /health
    app.register_blueprint(owners_bp)
    app.register_blueprint(vets_bp)


def register_error_handlers(app):
    """Register error handlers for common HTTP errors"""

    @app.errorhandler(404)
    def not_found_error(error):
        """Handle 404 errors"""
        return render_template('errors/404.html'), 404

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors"""
        original = getattr(error, 'original_exception', None) or error
        app.logger.error('Unhandled exception (500): %s', original, exc_info=original)
        db.session.rollback()
        return render_template('errors/500.html', error=original), 500


def register_shell_context(app):
    """Register shell context for Flask CLI"""

    @app.shell_context_processor
    def make_shell_context():
        """Make database models available in Flask shell"""
        from petclinic.models import Owner, Pet, PetType, Visit, Vet, Specialty
        return {
            'db': db,
            'Owner': Owner,
            'Pet': Pet,
            'PetType': PetType,
            'Visit': Visit,
            'Vet': Vet,
            'Specialty': Specialty,
        }


def register_cli_commands(app):
    """Register custom CLI commands"""
    from petclinic.cli import seed_pet_types_command, seed_sample_data_command

    app.cli.add_command(seed_pet_types_command)
    app.cli.add_command(seed_sample_data_command)
