"""Shared request helpers for the endpoint tests."""

CLIENT_FORM = {
    'first_name': 'Ana',
    'last_name': 'García',
    'country': 'México',
    'email': 'a@x.com',
    'password': 'pw123',
}


def register(client, **overrides):
    form = dict(CLIENT_FORM, **overrides)
    return client.post('/registro', data=form)


def login(client, email='a@x.com', password='pw123'):
    return client.post('/inicio', data={'email': email, 'password': password})


def setup_admin(client, email='boss@x.com', password='s3cret'):
    return client.post('/admin/setup', data={'email': email, 'password': password})


def admin_login(client, email='boss@x.com', password='s3cret'):
    return client.post('/admin/login', data={'email': email, 'password': password})
