from sqlalchemy import Column, Integer, Float, Boolean, DateTime, ForeignKey, Index
from sqlalchemy.orm import declared_attr

from homeapi.db import db

DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


class OwnedResourceMixin:
    """
    Colunas comuns a todas as famílias de recursos.

    A coluna do dono chama-se ``user`` na tabela, mas o atributo Python é
    ``user_id`` para não confundir com um relacionamento.
    """

    id = Column(Integer, primary_key=True)
    # datas guardadas sempre em UTC, sem tzinfo (o SQLite descarta o fuso)
    date = Column(DateTime, nullable=False)

    @declared_attr
    def user_id(cls):
        return Column('user', Integer, ForeignKey('users.id'), nullable=False, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'date': self.date.strftime(DATE_FORMAT) if self.date else None,
            'value': self.value,
            'user': self.user_id,
        }

    def __repr__(self):
        return f"<{type(self).__name__} {self.id} user={self.user_id} value={self.value!r}>"


class Temperature(OwnedResourceMixin, db.Model):
    __tablename__ = 'temperatures'

    value = Column(Float, nullable=False)

    # /last ordena por data dentro do mesmo usuário
    __table_args__ = (
        Index('idx_temperatures_user_date', 'user', 'date'),
    )


class Switch(OwnedResourceMixin, db.Model):
    __tablename__ = 'switches'

    value = Column(Boolean, nullable=False)


class Light(OwnedResourceMixin, db.Model):
    __tablename__ = 'lights'

    value = Column(Integer, nullable=False)
