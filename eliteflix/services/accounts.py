"""
Accounts Service

Client registration, client and admin login, and the one-time admin setup.
"""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from eliteflix.session_state import ClientIdentity, AdminIdentity
from eliteflix.errors import (
    ValidationError, BadCredentials, AccountNotFound, DuplicateEmail, DuplicateOrInvalid
)
from eliteflix.extensions import db
from eliteflix.models import Role, User
from eliteflix.services.credentials import hash_password, verify_password
from eliteflix.services.sanitizer import sanitize

logger = logging.getLogger(__name__)


def _require(**fields):
    missing = [name for name, value in fields.items() if not value]
    if missing:
        raise ValidationError(missing)


def _insert_user(user):
    try:
        db.session.add(user)
        db.session.commit()
    except IntegrityError as e:
        db.session.rollback()
        logger.info('Unique constraint rejected %s', user.email)
        raise DuplicateEmail(user.email) from e
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.exception('Could not create user %s', user.email)
        raise DuplicateOrInvalid(user.email) from e
    return user


def register_client(first_name, last_name, country, email, password):
    """Create a client account with zero balance and points.
    
    Raises:
        ValidationError: a field is missing (after sanitizing)
        DuplicateEmail: the email is already registered
        DuplicateOrInvalid: any other insert failure
    """
    first_name = sanitize(first_name)
    last_name = sanitize(last_name)
    country = sanitize(country)
    email = sanitize(email)
    _require(first_name=first_name, last_name=last_name, country=country,
             email=email, password=password)
    
    if User.query.filter_by(email=email).first():
        raise DuplicateEmail(email)
    
    user = User(email=email, password_hash=hash_password(password), role=Role.CLIENT,
                first_name=first_name, last_name=last_name, country=country,
                points=0, balance_cents=0)
    _insert_user(user)
    logger.info('Registered client %s (id=%s)', email, user.id)
    return user


def _authenticate(role, email, password):
    _require(email=email, password=password)
    user = User.query.filter_by(email=email, role=role).first()
    if user is None:
        raise AccountNotFound(email)
    if not verify_password(password, user.password_hash):
        raise BadCredentials(email)
    return user


def login_client(email, password):
    """Check client credentials and return the session snapshot.
    
    The email must match exactly as stored.
    """
    return ClientIdentity.from_user(_authenticate(Role.CLIENT, email, password))


def login_admin(email, password):
    """Check admin credentials and return the session snapshot."""
    return AdminIdentity.from_user(_authenticate(Role.ADMIN, email, password))


def admin_count():
    return User.query.filter_by(role=Role.ADMIN).count()


def admin_exists():
    return admin_count() > 0


def create_admin(email, password):
    """Create the sole admin. Refuses once any admin exists.
    
    The check is repeated by the single-admin unique index on insert, so two
    overlapping setup requests still leave exactly one admin.
    """
    email = sanitize(email)
    _require(email=email, password=password)
    if admin_exists():
        raise DuplicateOrInvalid('An admin account already exists')
    user = User(email=email, password_hash=hash_password(password), role=Role.ADMIN)
    try:
        _insert_user(user)
    except DuplicateEmail:
        # uq_users_single_admin rejects a second admin inserted concurrently
        if admin_count() > 0:
            raise DuplicateOrInvalid('An admin account already exists') from None
        raise
    logger.info('Admin account created: %s', email)
    return user
