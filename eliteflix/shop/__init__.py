"""
Shop Blueprint

Public catalog pages and the client's own profile and support form.
"""

from flask import Blueprint

shop_bp = Blueprint('shop', __name__)

from eliteflix.shop import routes  # noqa: E402, F401
