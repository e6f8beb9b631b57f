from datetime import date, datetime

from eliteflix.extensions import db
from eliteflix.models import Order, Product, Role, User

from tests.helpers import register, login, setup_admin, admin_login


def _admins(app):
    with app.app_context():
        return User.query.filter_by(role=Role.ADMIN).all()


def test_login_redirects_to_setup_until_admin_exists(client):
    r = client.get('/admin/login')
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/admin/setup')


def test_setup_form_renders_while_no_admin(client):
    r = client.get('/admin/setup')
    assert r.status_code == 200
    assert 'Crear administrador' in r.get_data(as_text=True)


def test_setup_is_one_shot(app, client):
    r = setup_admin(client)
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/admin/login')
    
    for _ in range(3):
        r = client.get('/admin/setup')
        assert r.status_code == 302
        assert r.headers['Location'].endswith('/admin/login')
    
    r = setup_admin(client, email='intruder@x.com', password='hax')
    assert r.status_code == 302
    admins = _admins(app)
    assert [a.email for a in admins] == ['boss@x.com']


def test_setup_gate_holds_for_fresh_clients(app):
    first, second = app.test_client(), app.test_client()
    setup_admin(first)
    assert second.get('/admin/setup').status_code == 302


def test_setup_requires_fields(app, client):
    r = setup_admin(client, password='')
    assert r.status_code == 400
    assert _admins(app) == []


def test_admin_login_only_for_first_admin(client):
    setup_admin(client)
    setup_admin(client, email='intruder@x.com', password='hax')
    
    r = admin_login(client, email='intruder@x.com', password='hax')
    assert r.status_code == 401
    assert 'Credenciales de administrador inválidas' in r.get_data(as_text=True)
    
    r = admin_login(client, password='wrong')
    assert r.status_code == 401
    
    r = admin_login(client)
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/admin/dashboard')


def test_client_credentials_do_not_open_admin(client):
    setup_admin(client)
    register(client)
    r = admin_login(client, email='a@x.com', password='pw123')
    assert r.status_code == 401


def test_dashboard_requires_admin(client):
    setup_admin(client)
    r = client.get('/admin/dashboard')
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/admin/login')
    
    register(client)
    login(client)
    r = client.get('/admin/dashboard')
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/admin/login')


def test_logged_in_admin_skips_login_form(client):
    setup_admin(client)
    admin_login(client)
    r = client.get('/admin/login')
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/admin/dashboard')


def test_dashboard_totals(app, client):
    setup_admin(client)
    register(client)
    register(client, email='b@x.com')
    with app.app_context():
        user = User.query.filter_by(email='a@x.com').first()
        netflix = Product.query.filter_by(name='Netflix').first()
        disney = Product.query.filter_by(name='Disney+').first()
        db.session.add_all([
            Order(user_id=user.id, product_id=netflix.id, price_cents=netflix.price_cents),
            Order(user_id=user.id, product_id=disney.id, price_cents=disney.price_cents,
                  start_date=date(2026, 1, 1), end_date=date(2026, 1, 31),
                  created_at=datetime(2026, 1, 1)),
        ])
        db.session.commit()
    
    admin_login(client)
    body = client.get('/admin/dashboard').get_data(as_text=True)
    assert '<div id="total-clients">2</div>' in body
    assert '<div id="total-orders">2</div>' in body
    assert '$175.00 MXN' in body


def test_dashboard_with_no_orders(client):
    setup_admin(client)
    admin_login(client)
    body = client.get('/admin/dashboard').get_data(as_text=True)
    assert '<div id="total-orders">0</div>' in body
    assert '$0.00 MXN' in body


def test_admin_and_client_logouts_are_independent(client):
    setup_admin(client)
    register(client)
    login(client)
    admin_login(client)
    
    assert client.get('/perfil').status_code == 200
    assert client.get('/admin/dashboard').status_code == 200
    
    assert client.post('/admin/logout').status_code == 302
    assert client.get('/perfil').status_code == 200
    assert client.get('/admin/dashboard').status_code == 302
    
    admin_login(client)
    client.post('/salir')
    assert client.get('/perfil').status_code == 302
    assert client.get('/admin/dashboard').status_code == 200


def test_admin_logout_requires_admin(client):
    r = client.post('/admin/logout')
    assert r.status_code == 302
    assert r.headers['Location'].endswith('/admin/login')


def test_setup_with_taken_email_keeps_form_open(app, client):
    register(client)
    r = setup_admin(client, email='a@x.com')
    assert r.status_code == 409
    assert 'No se pudo crear el administrador' in r.get_data(as_text=True)
    assert _admins(app) == []
    assert client.get('/admin/setup').status_code == 200
