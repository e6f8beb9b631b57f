"""
Admin Blueprint

Admin authentication is session-based and separate from client
authentication: an admin login never logs a client in or out.
"""

from flask import Blueprint

admin_bp = Blueprint('admin', __name__)

from eliteflix.admin import routes  # noqa: E402, F401
