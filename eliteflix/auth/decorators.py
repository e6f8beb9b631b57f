"""
Route Guards

Each decorator evaluates the matching guard from eliteflix.session_state
against the current session and redirects to that guard's login page on
failure. Client and admin guards are independent: an admin session does not
satisfy client_required and vice versa.
"""

from functools import wraps
from flask import session, redirect, url_for

from eliteflix.models import Role
from eliteflix.session_state import SessionState, guard_for


def role_required(role):
    """Build a decorator that lets the request through only for ``role``."""
    guard = guard_for(role)
    
    def decorator(f):
        @wraps(f)
        def wrapper(*args, **kwargs):
            target = guard(SessionState.from_session(session))
            if target is not None:
                return redirect(url_for(target))
            return f(*args, **kwargs)
        return wrapper
    return decorator


client_required = role_required(Role.CLIENT)
admin_required = role_required(Role.ADMIN)
