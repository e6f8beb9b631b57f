"""
Credential Verifier

One-way password hashing with a random salt per call.
"""

from werkzeug.security import generate_password_hash, check_password_hash

HASH_METHOD = 'pbkdf2:sha256'


def hash_password(plaintext):
    """Hash a password for storage."""
    return generate_password_hash(plaintext, method=HASH_METHOD)


def verify_password(plaintext, digest):
    """Check a password against a stored digest.
    
    A wrong password, a missing digest and a malformed digest all come back
    as False; this never raises.
    """
    if not digest or plaintext is None:
        return False
    try:
        return check_password_hash(digest, plaintext)
    except (ValueError, TypeError):
        return False
