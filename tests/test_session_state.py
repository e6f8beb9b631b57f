import pytest

from eliteflix.models import Role
from eliteflix.session_state import (
    SessionState, ClientIdentity, AdminIdentity, client_guard, admin_guard, guard_for
)

CLIENT = ClientIdentity(id=1, email='a@x.com', first_name='Ana', last_name='García',
                        country='México', balance_cents=0)
ADMIN = AdminIdentity(id=2, email='boss@x.com')


def test_anonymous_fails_both_guards():
    state = SessionState()
    assert state.is_anonymous
    assert client_guard(state) == 'auth.login'
    assert admin_guard(state) == 'admin.admin_login'


def test_client_guard_ignores_admin_state():
    state = SessionState(admin=ADMIN)
    assert client_guard(state) == 'auth.login'
    assert admin_guard(state) is None


def test_admin_guard_ignores_client_state():
    state = SessionState(client=CLIENT)
    assert client_guard(state) is None
    assert admin_guard(state) == 'admin.admin_login'


def test_mutators_return_new_values():
    state = SessionState()
    logged_in = state.with_client(CLIENT)
    assert state.client is None
    assert logged_in.client == CLIENT
    assert logged_in.with_admin(ADMIN).without_client() == SessionState(admin=ADMIN)


def test_logout_is_idempotent():
    state = SessionState(client=CLIENT)
    assert state.without_client() == state.without_client().without_client()


def test_apply_and_read_back():
    session = {'_flashes': []}
    SessionState(client=CLIENT, admin=ADMIN).apply(session)
    assert SessionState.from_session(session) == SessionState(client=CLIENT, admin=ADMIN)
    
    SessionState(admin=ADMIN).apply(session)
    assert 'client' not in session
    assert session['_flashes'] == []
    assert SessionState.from_session(session).admin == ADMIN


def test_guard_for_every_role():
    assert guard_for(Role.CLIENT) is client_guard
    assert guard_for('admin') is admin_guard


def test_guard_for_unknown_role():
    with pytest.raises(ValueError):
        guard_for('superuser')


def test_client_identity_works_with_flask_login():
    assert CLIENT.get_id() == '1'
    assert CLIENT.is_authenticated
    assert CLIENT.full_name == 'Ana García'
