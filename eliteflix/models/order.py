"""
Order Model
"""

from datetime import datetime

from eliteflix.extensions import db


class OrderStatus:
    """Order status values"""
    PENDING = 'pending'
    ACTIVE = 'active'


class Order(db.Model):
    """A purchase of one product by one user"""
    __tablename__ = 'orders'
    
    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    product_id = db.Column(db.Integer, db.ForeignKey('products.id'), nullable=False)
    price_cents = db.Column(db.Integer, nullable=False)
    status = db.Column(db.String(20), nullable=False, default=OrderStatus.PENDING)
    # Filled in by hand on fulfillment
    credentials = db.Column(db.Text)
    start_date = db.Column(db.Date)
    end_date = db.Column(db.Date)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    
    def __repr__(self):
        return f'<Order {self.id} user:{self.user_id} product:{self.product_id} {self.status}>'
