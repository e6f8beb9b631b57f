"""
Models Package

Exports all models for easy importing.
"""

from eliteflix.models.user import Role, User
from eliteflix.models.product import Product
from eliteflix.models.order import Order, OrderStatus
from eliteflix.models.ticket import SupportTicket

__all__ = ['Role', 'User', 'Product', 'Order', 'OrderStatus', 'SupportTicket']
