"""
Admin Dashboard Services

Aggregate figures for the admin dashboard.
"""

from typing import NamedTuple

from sqlalchemy import func

from eliteflix.extensions import db
from eliteflix.models import Order, Role, User


class DashboardTotals(NamedTuple):
    clients: int
    orders: int
    revenue_cents: int


def dashboard_totals():
    """Client count, order count and total revenue over every order."""
    clients = User.query.filter_by(role=Role.CLIENT).count()
    orders = Order.query.count()
    revenue = db.session.query(func.coalesce(func.sum(Order.price_cents), 0)).scalar()
    return DashboardTotals(clients=clients, orders=orders, revenue_cents=int(revenue or 0))
