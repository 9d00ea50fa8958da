"""Base model class with common fields."""
from geoattend import db
from geoattend.utils.helpers import utcnow

class BaseModel(db.Model):
    """Base model class with an integer key and creation timestamp."""
    
    __abstract__ = True
    
    id = db.Column(db.Integer, primary_key=True)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    
    def __repr__(self) -> str:
        return f'<{self.__class__.__name__} {self.id}>'
