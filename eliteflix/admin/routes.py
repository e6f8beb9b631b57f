"""
Admin Routes

One-time admin setup, admin login/logout and the dashboard. Admin identity
lives only in the session's admin sub-state, never in Flask-Login.
"""

import logging

from flask import render_template, request, redirect, url_for, flash, session

from eliteflix.admin import admin_bp
from eliteflix.admin.services import dashboard_totals
from eliteflix.auth.decorators import admin_required
from eliteflix.errors import ValidationError, BadCredentials, DuplicateOrInvalid
from eliteflix.services import admin_exists, create_admin, login_admin
from eliteflix.session_state import SessionState

logger = logging.getLogger(__name__)


@admin_bp.route('/setup', methods=['GET', 'POST'])
def admin_setup():
    """Create the sole admin. Closed for good once an admin exists."""
    if admin_exists():
        return redirect(url_for('admin.admin_login'))
    
    if request.method == 'POST':
        email = request.form.get('email', '').strip()
        password = request.form.get('password', '')
        
        try:
            create_admin(email, password)
        except ValidationError:
            flash('Escribe correo y contraseña.', 'danger')
            return render_template('admin/setup.html', email=email), 400
        except DuplicateOrInvalid:
            flash('No se pudo crear el administrador.', 'danger')
            return render_template('admin/setup.html', email=email), 409
        
        flash('Administrador creado. Ahora inicia sesión.', 'success')
        return redirect(url_for('admin.admin_login'))
    
    return render_template('admin/setup.html', email='')


@admin_bp.route('/login', methods=['GET', 'POST'])
def admin_login():
    """Admin login page, independent of client login."""
    if not admin_exists():
        return redirect(url_for('admin.admin_setup'))
    
    state = SessionState.from_session(session)
    if state.admin is not None:
        return redirect(url_for('admin.admin_dashboard'))
    
    if request.method == 'POST':
        email = request.form.get('email', '').strip()
        password = request.form.get('password', '')
        
        try:
            identity = login_admin(email, password)
        except ValidationError:
            flash('Escribe correo y contraseña.', 'danger')
            return render_template('admin/login.html', email=email), 400
        except BadCredentials:
            logger.warning('Failed admin login for %s', email)
            flash('Credenciales de administrador inválidas.', 'danger')
            return render_template('admin/login.html', email=email), 401
        
        session.rotate()
        state.with_admin(identity).apply(session)
        flash('¡Bienvenido, administrador!', 'success')
        return redirect(url_for('admin.admin_dashboard'))
    
    return render_template('admin/login.html', email='')


@admin_bp.route('/logout', methods=['POST'])
@admin_required
def admin_logout():
    """Admin logout, leaves any client login in place."""
    SessionState.from_session(session).without_admin().apply(session)
    flash('Sesión de administrador cerrada.', 'info')
    return redirect(url_for('admin.admin_login'))


@admin_bp.route('/dashboard')
@admin_required
def admin_dashboard():
    """Admin dashboard with store totals."""
    totals = dashboard_totals()
    admin = SessionState.from_session(session).admin
    return render_template('admin/dashboard.html', totals=totals, admin=admin)
