# /homeapi/models/Users.py
from flask_login import UserMixin
from sqlalchemy import Column, Integer, String
from werkzeug.security import generate_password_hash, check_password_hash

from homeapi.db import db


# UserMixin já implementa is_authenticated, is_active e get_id para o Flask-Login
class User(UserMixin, db.Model):
    __tablename__ = 'users'

    id = Column(Integer, primary_key=True)
    username = Column(String(80), unique=True, nullable=False)
    name = Column(String(120), nullable=False)
    password_hash = Column(String(256), nullable=False)

    def set_password(self, password):
        self.password_hash = generate_password_hash(password)

    def check_password(self, password):
        return check_password_hash(self.password_hash, password)

    def to_dict(self):
        # nunca devolve o hash da senha
        return {
            'id': self.id,
            'username': self.username,
            'name': self.name,
        }

    def __repr__(self):
        return f"<User {self.username}>"
