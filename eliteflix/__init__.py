"""
Éliteflix - Application Factory

This module provides the Flask application factory pattern for creating
and configuring the application instance.
"""

import logging
import os

from flask import Flask, render_template, request, session
from sqlalchemy import inspect, text
from sqlalchemy.engine import make_url

from eliteflix.extensions import db, login_manager
from eliteflix.config import Config
from eliteflix.sessions import MemorySessionInterface
from eliteflix.session_state import SessionState

logger = logging.getLogger(__name__)

SECURITY_HEADERS = {
    'X-Content-Type-Options': 'nosniff',
    'X-Frame-Options': 'SAMEORIGIN',
    'Referrer-Policy': 'no-referrer',
    'Cross-Origin-Opener-Policy': 'same-origin',
    'X-DNS-Prefetch-Control': 'off',
}

# Columns added after the first release: table -> [(column, DDL type)]
ADDITIVE_COLUMNS = {
    'users': [
        ('first_name', 'TEXT'),
        ('last_name', 'TEXT'),
        ('country', 'TEXT'),
        ('balance_cents', 'INTEGER DEFAULT 0'),
    ],
    'orders': [
        ('start_date', 'TEXT'),
        ('end_date', 'TEXT'),
    ],
}

# Indexes added after the first release, created when missing
ADDITIVE_INDEXES = [
    "CREATE UNIQUE INDEX IF NOT EXISTS uq_users_single_admin ON users (role) WHERE role = 'admin'",
]


def create_app(config_class=Config):
    """Create and configure the Flask application.
    
    Args:
        config_class: Configuration class to use (default: Config)
    
    Returns:
        Configured Flask application instance
    """
    app = Flask(__name__)
    app.config.from_object(config_class)
    _configure_logging(app)
    
    # Initialize extensions
    db.init_app(app)
    login_manager.init_app(app)
    app.session_interface = MemorySessionInterface()
    
    # Register blueprints
    from eliteflix.auth import auth_bp
    from eliteflix.admin import admin_bp
    from eliteflix.shop import shop_bp
    
    app.register_blueprint(shop_bp)
    app.register_blueprint(auth_bp)
    app.register_blueprint(admin_bp, url_prefix='/admin')
    
    from eliteflix.cli import register_commands
    register_commands(app)
    
    @login_manager.user_loader
    def load_user(user_id):
        """Return the client snapshot held in the session, no DB read."""
        client = SessionState.from_session(session).client
        if client is not None and client.get_id() == user_id:
            return client
        return None
    
    @app.context_processor
    def inject_identities():
        state = SessionState.from_session(session)
        return dict(current_client=state.client, current_admin=state.admin)
    
    @app.template_filter('money')
    def money_filter(cents):
        return format_money(cents, app.config['CURRENCY_SYMBOL'], app.config['CURRENCY_CODE'])
    
    @app.after_request
    def add_security_headers(response):
        for header, value in SECURITY_HEADERS.items():
            response.headers.setdefault(header, value)
        logger.info('%s %s %s', request.method, request.path, response.status_code)
        return response
    
    @app.errorhandler(404)
    def page_not_found(e):
        return render_template('errors/404.html'), 404
    
    # Create database tables
    with app.app_context():
        url = make_url(app.config['SQLALCHEMY_DATABASE_URI'])
        if url.get_backend_name() == 'sqlite' and url.database and url.database != ':memory:':
            os.makedirs(os.path.dirname(os.path.abspath(url.database)), exist_ok=True)
        db.create_all()
        _ensure_schema()
        if app.config.get('SEED_PRODUCTS'):
            from eliteflix.services.catalog import seed_products
            seed_products()
    
    return app


def format_money(cents, symbol='$', code='MXN'):
    """Format an amount in cents, e.g. 9000 -> '$90.00 MXN'."""
    cents = int(cents or 0)
    sign = '-' if cents < 0 else ''
    units, rest = divmod(abs(cents), 100)
    return f'{sign}{symbol}{units:,}.{rest:02d} {code}'


def _configure_logging(app):
    level = getattr(logging, str(app.config.get('LOG_LEVEL', 'INFO')).upper(), logging.INFO)
    logging.basicConfig(level=level, format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    logging.getLogger('eliteflix').setLevel(level)


def _ensure_schema():
    """Add columns and indexes missing from databases created by older releases."""
    inspector = inspect(db.engine)
    for table, columns in ADDITIVE_COLUMNS.items():
        try:
            existing = {col['name'] for col in inspector.get_columns(table)}
        except Exception as e:
            logger.warning('Could not inspect table %s: %s', table, e)
            continue
        for name, ddl in columns:
            if name in existing:
                continue
            try:
                with db.engine.begin() as conn:
                    conn.execute(text(f'ALTER TABLE {table} ADD COLUMN {name} {ddl}'))
                logger.info('Added %s.%s column', table, name)
            except Exception as e:
                logger.warning('Could not add %s.%s: %s', table, name, e)
    for ddl in ADDITIVE_INDEXES:
        try:
            with db.engine.begin() as conn:
                conn.execute(text(ddl))
        except Exception as e:
            logger.warning('Could not apply %r: %s', ddl, e)
