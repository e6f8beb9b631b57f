"""
Shop Routes

Landing page, catalog, client profile and support tickets.
"""

from flask import render_template, request, redirect, url_for, flash, session, current_app

from eliteflix.auth.decorators import client_required
from eliteflix.errors import ValidationError, StoreError
from eliteflix.services import list_active_products, get_client_profile, submit_ticket
from eliteflix.session_state import SessionState
from eliteflix.shop import shop_bp


@shop_bp.route('/')
def index():
    """Landing page with a strip of product logos"""
    products = list_active_products(limit=current_app.config['LANDING_PRODUCT_LIMIT'])
    return render_template('shop/index.html', products=products)


@shop_bp.route('/catalogo')
def catalog():
    """All active products with prices"""
    return render_template('shop/catalog.html', products=list_active_products())


def _render_profile(status=200, ticket=None):
    client = SessionState.from_session(session).client
    _, orders = get_client_profile(client.id)
    return render_template('shop/profile.html', client=client, orders=orders,
                           ticket=ticket or {}), status


@shop_bp.route('/perfil')
@client_required
def profile():
    """Client profile and order history.
    
    Profile fields come from the login snapshot; orders are read fresh.
    """
    return _render_profile()


@shop_bp.route('/soporte', methods=['POST'])
@client_required
def support():
    """Open a support ticket"""
    client = SessionState.from_session(session).client
    ticket = {
        'subject': request.form.get('subject', ''),
        'message': request.form.get('message', ''),
    }
    
    try:
        submit_ticket(client.id, ticket['subject'], ticket['message'])
    except ValidationError:
        flash('Escribe el asunto y el mensaje.', 'danger')
        return _render_profile(status=400, ticket=ticket)
    except StoreError:
        flash('No se pudo enviar tu mensaje. Inténtalo más tarde.', 'danger')
        return redirect(url_for('shop.profile'))
    
    flash('Recibimos tu mensaje, te responderemos pronto.', 'success')
    return redirect(url_for('shop.profile'))
