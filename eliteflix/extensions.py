"""
Flask Extensions

Client logins go through Flask-Login. Admin authentication is session-based
and kept apart from it, see eliteflix.session_state.
"""

from flask_sqlalchemy import SQLAlchemy
from flask_login import LoginManager

# Database instance
db = SQLAlchemy()

# Login manager for client authentication (NOT for admin)
login_manager = LoginManager()
