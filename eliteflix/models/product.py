"""
Product Model
"""

from eliteflix.extensions import db

EMAIL_PLACEHOLDER = '{{email}}'


class Product(db.Model):
    """A subscription offering sold in the catalog"""
    __tablename__ = 'products'
    
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    price_cents = db.Column(db.Integer, nullable=False)
    period = db.Column(db.String(20), nullable=False, default='1M')
    category = db.Column(db.String(60))
    logo_url = db.Column(db.String(255))
    active = db.Column(db.Boolean, nullable=False, default=True)
    # Contains EMAIL_PLACEHOLDER, replaced by the buyer's email on fulfillment
    details_template = db.Column(db.Text)
    
    orders = db.relationship('Order', backref='product', lazy=True)
    
    def details_for(self, email):
        """Render the credentials template for a buyer."""
        return (self.details_template or '').replace(EMAIL_PLACEHOLDER, email)
    
    def __repr__(self):
        return f'<Product {self.name} {self.price_cents}>'
