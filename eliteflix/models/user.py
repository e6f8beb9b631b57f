"""
User Model
"""

import enum
from datetime import datetime

from eliteflix.extensions import db


class Role(str, enum.Enum):
    """Closed set of account roles."""
    CLIENT = 'client'
    ADMIN = 'admin'


class User(db.Model):
    """A client or the single admin account"""
    __tablename__ = 'users'
    # At most one admin row
    __table_args__ = (
        db.Index('uq_users_single_admin', 'role', unique=True,
                 sqlite_where=db.text("role = 'admin'"),
                 postgresql_where=db.text("role = 'admin'")),
    )
    
    id = db.Column(db.Integer, primary_key=True)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(255), nullable=False)
    role = db.Column(db.Enum(Role, name='user_role', values_callable=lambda e: [m.value for m in e]),
                     nullable=False, default=Role.CLIENT)
    points = db.Column(db.Integer, nullable=False, default=0)
    # Balance in cents
    balance_cents = db.Column(db.Integer, nullable=False, default=0)
    first_name = db.Column(db.String(100))
    last_name = db.Column(db.String(100))
    country = db.Column(db.String(100))
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    
    orders = db.relationship('Order', backref='user', lazy=True)
    tickets = db.relationship('SupportTicket', backref='user', lazy=True)
    
    def __repr__(self):
        return f'<User {self.email} ({self.role.value})>'
