"""
Auth Routes

Client registration, login and logout using Flask-Login.
"""

import logging

from flask import render_template, request, redirect, url_for, flash, session
from flask_login import login_user, logout_user, current_user

from eliteflix.auth import auth_bp
from eliteflix.auth.decorators import client_required
from eliteflix.errors import ValidationError, BadCredentials, DuplicateEmail, DuplicateOrInvalid
from eliteflix.services import register_client, login_client
from eliteflix.session_state import SessionState

logger = logging.getLogger(__name__)

REGISTRATION_FIELDS = ('first_name', 'last_name', 'country', 'email', 'password')


@auth_bp.route('/registro', methods=['GET', 'POST'])
def register():
    """Client self-registration"""
    if current_user.is_authenticated:
        return redirect(url_for('shop.profile'))
    
    if request.method == 'POST':
        form = {name: request.form.get(name, '') for name in REGISTRATION_FIELDS}
        try:
            register_client(**form)
        except ValidationError:
            flash('Todos los campos son obligatorios.', 'danger')
            return render_template('auth/register.html', form=form), 400
        except DuplicateEmail:
            flash('Ese correo ya está registrado. Inicia sesión o usa otro correo.', 'danger')
            return render_template('auth/register.html', form=form), 409
        except DuplicateOrInvalid:
            flash('No se pudo crear la cuenta. Inténtalo de nuevo.', 'danger')
            return render_template('auth/register.html', form=form), 400
        
        flash('¡Registro exitoso! Ahora inicia sesión.', 'success')
        return redirect(url_for('auth.login'))
    
    return render_template('auth/register.html', form={})


@auth_bp.route('/inicio', methods=['GET', 'POST'])
def login():
    """Client login"""
    if current_user.is_authenticated:
        return redirect(url_for('shop.profile'))
    
    if request.method == 'POST':
        email = request.form.get('email', '').strip()
        password = request.form.get('password', '')
        
        try:
            identity = login_client(email, password)
        except ValidationError:
            flash('Escribe tu correo y contraseña.', 'danger')
            return render_template('auth/login.html', email=email), 400
        except BadCredentials:
            logger.info('Failed client login for %s', email)
            flash('Correo o contraseña incorrectos.', 'danger')
            return render_template('auth/login.html', email=email), 401
        
        session.rotate()
        SessionState.from_session(session).with_client(identity).apply(session)
        login_user(identity)
        flash(f'¡Bienvenido, {identity.first_name}!', 'success')
        return redirect(url_for('shop.profile'))
    
    return render_template('auth/login.html', email='')


@auth_bp.route('/salir', methods=['POST'])
@client_required
def logout():
    """Client logout, leaves any admin login in place"""
    logout_user()
    SessionState.from_session(session).without_client().apply(session)
    flash('Sesión cerrada correctamente.', 'info')
    return redirect(url_for('shop.index'))
