"""
Session State

The authenticated identities held by one browser session, as an explicit
value. Client and admin sub-states are independent: logging one in or out
never touches the other.

Identities are snapshots taken at login. They are not re-read from the
database while the session lives, so profile or balance changes made
elsewhere only show up after the next login.
"""

from dataclasses import dataclass, asdict, replace
from typing import Optional

from flask_login import UserMixin

from eliteflix.models import Role

CLIENT_KEY = 'client'
ADMIN_KEY = 'admin'

CLIENT_LOGIN_ENDPOINT = 'auth.login'
ADMIN_LOGIN_ENDPOINT = 'admin.admin_login'


@dataclass(frozen=True)
class ClientIdentity(UserMixin):
    """Snapshot of a logged-in client."""
    id: int
    email: str
    first_name: str
    last_name: str
    country: str
    balance_cents: int = 0
    
    role = Role.CLIENT
    
    @classmethod
    def from_user(cls, user):
        return cls(id=user.id, email=user.email, first_name=user.first_name or '',
                   last_name=user.last_name or '', country=user.country or '',
                   balance_cents=user.balance_cents or 0)
    
    @property
    def full_name(self):
        return f'{self.first_name} {self.last_name}'.strip()


@dataclass(frozen=True)
class AdminIdentity:
    """Snapshot of the logged-in admin."""
    id: int
    email: str
    
    role = Role.ADMIN
    
    @classmethod
    def from_user(cls, user):
        return cls(id=user.id, email=user.email)


@dataclass(frozen=True)
class SessionState:
    """Who is logged in, for one session."""
    client: Optional[ClientIdentity] = None
    admin: Optional[AdminIdentity] = None
    
    @classmethod
    def from_session(cls, session):
        client = session.get(CLIENT_KEY)
        admin = session.get(ADMIN_KEY)
        return cls(
            client=ClientIdentity(**client) if client else None,
            admin=AdminIdentity(**admin) if admin else None,
        )
    
    @property
    def is_anonymous(self):
        return self.client is None and self.admin is None
    
    def with_client(self, identity):
        return replace(self, client=identity)
    
    def without_client(self):
        return replace(self, client=None)
    
    def with_admin(self, identity):
        return replace(self, admin=identity)
    
    def without_admin(self):
        return replace(self, admin=None)
    
    def apply(self, session):
        """Write this state into a Flask session mapping."""
        for key, identity in ((CLIENT_KEY, self.client), (ADMIN_KEY, self.admin)):
            if identity is None:
                session.pop(key, None)
            else:
                session[key] = asdict(identity)


def client_guard(state: SessionState) -> Optional[str]:
    """None when a client is logged in, else the endpoint to redirect to."""
    return None if state.client is not None else CLIENT_LOGIN_ENDPOINT


def admin_guard(state: SessionState) -> Optional[str]:
    """None when an admin is logged in, else the endpoint to redirect to."""
    return None if state.admin is not None else ADMIN_LOGIN_ENDPOINT


_GUARDS = {
    Role.CLIENT: client_guard,
    Role.ADMIN: admin_guard,
}


def guard_for(role):
    """Return the guard protecting routes for ``role``."""
    try:
        return _GUARDS[Role(role)]
    except (KeyError, ValueError):
        raise ValueError(f'Unknown role: {role!r}') from None
