"""
대학 모델
"""
from . import db

class College(db.Model):
    __tablename__ = 'colleges'

    id = db.Column(db.Integer, primary_key=True)
    unit_id = db.Column(db.Integer)
    name = db.Column(db.String(200), nullable=False)
    state = db.Column(db.String(50))
    website_address = db.Column(db.String(300))
    city = db.Column(db.String(100))

    school_lists = db.relationship('SchoolList', backref='college', lazy=True, cascade="all, delete-orphan")

    def to_dict(self):
        return {
            'id': self.id,
            'unitID': self.unit_id,
            'name': self.name,
            'state': self.state,
            'websiteAddress': self.website_address,
            'city': self.city
        }
