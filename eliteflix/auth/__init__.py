"""
Auth Blueprint

Client registration, login and logout.
"""

from flask import Blueprint

auth_bp = Blueprint('auth', __name__)

from eliteflix.auth import routes  # noqa: E402, F401
