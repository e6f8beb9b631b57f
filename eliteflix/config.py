"""
Configuration settings for the Éliteflix storefront
"""
import os
from datetime import timedelta

from dotenv import load_dotenv

load_dotenv()


class Config:
    """Flask application configuration"""
    
    # Signs nothing secret any more (sessions are server-side) but Flask
    # still requires it for flash() and the session interface
    SECRET_KEY = os.environ.get('SESSION_SECRET') or 'eliteflix-secret'
    
    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'eliteflix.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    
    # Session cookie (the cookie only carries an opaque session id)
    SESSION_COOKIE_NAME = 'eliteflix_session'
    SESSION_COOKIE_HTTPONLY = True
    SESSION_COOKIE_SAMESITE = 'Lax'
    PERMANENT_SESSION_LIFETIME = timedelta(
        minutes=int(os.environ.get('SESSION_LIFETIME_MINUTES') or 120))
    
    # Logging
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'
    
    # Storefront settings
    LANDING_PRODUCT_LIMIT = 12
    CURRENCY_SYMBOL = '$'
    CURRENCY_CODE = 'MXN'
    SEED_PRODUCTS = True
    FULFILLMENT_DAYS = 30


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
