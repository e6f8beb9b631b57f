"""
Server-side Sessions

Session content stays in this process; the cookie only carries an opaque id.
Sessions are not shared between processes, so running several workers needs
a shared store plugged in behind the same interface.
"""

import logging
import secrets
import threading
import time

from flask.sessions import SessionInterface, SessionMixin
from werkzeug.datastructures import CallbackDict

logger = logging.getLogger(__name__)


class ServerSideSession(CallbackDict, SessionMixin):
    """Session dict that remembers its id and whether it was touched."""
    
    def __init__(self, initial=None, sid=None, new=False):
        def on_update(self):
            self.modified = True
        super().__init__(initial, on_update)
        self.sid = sid
        self.new = new
        self.modified = False
        self.rotate_requested = False
    
    def rotate(self):
        """Move the content to a fresh id on the next save."""
        self.rotate_requested = True
        self.modified = True


class MemorySessionStore:
    """Process-local session storage with per-entry expiry."""
    
    def __init__(self, clock=time.monotonic):
        self._data = {}
        self._lock = threading.Lock()
        self._clock = clock
    
    def get(self, sid):
        with self._lock:
            entry = self._data.get(sid)
            if entry is None:
                return None
            expires_at, data = entry
            if expires_at <= self._clock():
                del self._data[sid]
                return None
            return dict(data)
    
    def set(self, sid, data, lifetime):
        with self._lock:
            self._data[sid] = (self._clock() + lifetime, dict(data))
    
    def delete(self, sid):
        with self._lock:
            self._data.pop(sid, None)
    
    def purge_expired(self):
        now = self._clock()
        with self._lock:
            expired = [sid for sid, (expires_at, _) in self._data.items() if expires_at <= now]
            for sid in expired:
                del self._data[sid]
        return len(expired)
    
    def __len__(self):
        with self._lock:
            return len(self._data)


class MemorySessionInterface(SessionInterface):
    """Flask session interface backed by a MemorySessionStore."""
    
    session_class = ServerSideSession
    
    def __init__(self, store=None):
        self.store = store if store is not None else MemorySessionStore()
    
    @staticmethod
    def _new_sid():
        return secrets.token_urlsafe(32)
    
    def open_session(self, app, request):
        sid = request.cookies.get(self.get_cookie_name(app))
        if sid:
            data = self.store.get(sid)
            if data is not None:
                return self.session_class(data, sid=sid)
        # New visitors are rare compared to requests, sweep here
        purged = self.store.purge_expired()
        if purged:
            logger.debug('Purged %d expired sessions', purged)
        return self.session_class(sid=self._new_sid(), new=True)
    
    def save_session(self, app, session, response):
        name = self.get_cookie_name(app)
        domain = self.get_cookie_domain(app)
        path = self.get_cookie_path(app)
        
        if not session:
            if session.modified:
                self.store.delete(session.sid)
                response.delete_cookie(name, domain=domain, path=path)
            return
        
        if session.rotate_requested:
            self.store.delete(session.sid)
            session.sid = self._new_sid()
            session.rotate_requested = False
            logger.debug('Session id rotated')
        
        lifetime = app.permanent_session_lifetime.total_seconds()
        self.store.set(session.sid, dict(session), lifetime)
        
        if not self.should_set_cookie(app, session) and not session.new:
            return
        response.set_cookie(
            name,
            session.sid,
            expires=self.get_expiration_time(app, session),
            httponly=self.get_cookie_httponly(app),
            domain=domain,
            path=path,
            secure=self.get_cookie_secure(app),
            samesite=self.get_cookie_samesite(app),
        )
