"""
Catalog Service

Product listing, the client profile read path, catalog seeding and manual
order fulfillment.
"""

import logging
from datetime import date, datetime, timedelta
from typing import NamedTuple, Optional

from sqlalchemy import func
from werkzeug.exceptions import NotFound

from eliteflix.extensions import db
from eliteflix.models import Order, OrderStatus, Product, User
from eliteflix.models.product import EMAIL_PLACEHOLDER

logger = logging.getLogger(__name__)

LOGO_BASE_URL = 'https://logo.clearbit.com/'

# name, price in pesos, period, category, logo domain
DEFAULT_PRODUCTS = [
    ('Netflix', 90, '1M', 'Streaming', 'netflix.com'),
    ('Disney+', 85, '1M', 'Streaming', 'disneyplus.com'),
    ('HBO Max', 65, '1M', 'Streaming', 'max.com'),
    ('Prime Video', 65, '1M', 'Streaming', 'amazon.com'),
    ('Spotify', 70, '1M', 'Música', 'spotify.com'),
    ('YouTube Premium', 75, '1M', 'Video', 'youtube.com'),
]


class OrderSummary(NamedTuple):
    """One row of a client's order history."""
    id: int
    product_name: str
    price_cents: int
    status: str
    credentials: Optional[str]
    start_date: Optional[date]
    end_date: Optional[date]
    created_at: Optional[datetime]


def pesos_to_cents(amount):
    return int(round(float(amount) * 100))


def list_active_products(limit=None):
    """Active products in natural store order."""
    query = Product.query.filter_by(active=True)
    if limit is not None:
        query = query.limit(limit)
    return query.all()


def get_client_profile(user_id):
    """Return the user and their orders, most recent end date first.
    
    Orders without an end date sort by their creation time instead.
    
    Raises:
        NotFound: no such user
    """
    user = db.session.get(User, user_id)
    if user is None:
        raise NotFound(f'User {user_id} not found')
    
    rows = db.session.query(Order, Product.name)\
        .join(Product, Order.product_id == Product.id)\
        .filter(Order.user_id == user_id)\
        .order_by(func.coalesce(Order.end_date, Order.created_at).desc())\
        .all()
    
    orders = [
        OrderSummary(id=order.id, product_name=name, price_cents=order.price_cents,
                     status=order.status, credentials=order.credentials,
                     start_date=order.start_date, end_date=order.end_date,
                     created_at=order.created_at)
        for order, name in rows
    ]
    return user, orders


def seed_products():
    """Insert the default catalog when the products table is empty.
    
    Returns:
        Number of products inserted
    """
    if Product.query.count() > 0:
        return 0
    
    for name, price, period, category, domain in DEFAULT_PRODUCTS:
        template = (f'Cuenta: {name} | Periodo: {period} | Usuario: {EMAIL_PLACEHOLDER} | '
                    'Contraseña: (se enviará por correo o en esta pantalla)')
        db.session.add(Product(name=name, price_cents=pesos_to_cents(price), period=period,
                               category=category, logo_url=LOGO_BASE_URL + domain,
                               active=True, details_template=template))
    db.session.commit()
    logger.info('Seeded %d products', len(DEFAULT_PRODUCTS))
    return len(DEFAULT_PRODUCTS)


def assign_credentials(order_id, credentials=None, days=30, today=None):
    """Fulfill an order by hand.
    
    Args:
        order_id: Order to fulfill
        credentials: Text to hand to the client; defaults to the product's
            details template rendered with the buyer's email
        days: Subscription length starting today
        today: Start date override
    
    Raises:
        NotFound: no such order
    """
    order = db.session.get(Order, order_id)
    if order is None:
        raise NotFound(f'Order {order_id} not found')
    
    start = today or date.today()
    order.credentials = credentials or order.product.details_for(order.user.email)
    order.status = OrderStatus.ACTIVE
    order.start_date = start
    order.end_date = start + timedelta(days=days)
    db.session.commit()
    logger.info('Order %s fulfilled until %s', order.id, order.end_date)
    return order
