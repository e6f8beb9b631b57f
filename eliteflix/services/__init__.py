"""
Services Package

Exports all services for easy importing.
"""

from eliteflix.services.credentials import hash_password, verify_password
from eliteflix.services.sanitizer import sanitize
from eliteflix.services.accounts import (
    register_client, login_client, login_admin, create_admin, admin_count, admin_exists
)
from eliteflix.services.catalog import (
    list_active_products, get_client_profile, seed_products, assign_credentials, OrderSummary
)
from eliteflix.services.support import submit_ticket

__all__ = [
    'hash_password',
    'verify_password',
    'sanitize',
    'register_client',
    'login_client',
    'login_admin',
    'create_admin',
    'admin_count',
    'admin_exists',
    'list_active_products',
    'get_client_profile',
    'seed_products',
    'assign_credentials',
    'OrderSummary',
    'submit_ticket'
]
