"""Student roster model."""
from geoattend import db
from geoattend.models.base import BaseModel

class Student(BaseModel):
    """A roster entry identified by its NIM."""
    
    __tablename__ = 'students'
    
    nim = db.Column(db.String(32), unique=True, nullable=False, index=True)
    name = db.Column(db.String(255), nullable=False, default='')

    def to_dict(self):
        return {
            'nim': self.nim,
            'name': self.name
        }
    
    def __repr__(self):
        return f'<Student {self.nim}>'
