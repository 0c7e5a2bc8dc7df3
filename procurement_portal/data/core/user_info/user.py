from procurement_portal import db
from werkzeug.security import generate_password_hash, check_password_hash
from flask_login import UserMixin
from datetime import datetime
from procurement_portal.buisness.core.data_insertion_mixin import DataInsertionMixin


class User(UserMixin, DataInsertionMixin, db.Model):
    """The principal behind every API request"""
    __tablename__ = 'users'

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password_hash = db.Column(db.String(255), nullable=False)
    is_active = db.Column(db.Boolean, default=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def to_dict(self, include=None, include_audit_fields=True):
        data = super().to_dict(include=include, include_audit_fields=include_audit_fields)
        data.pop('passwordHash', None)
        return data

    def __repr__(self):
        return f'<User {self.username}>'
