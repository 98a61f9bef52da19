import logging
from functools import wraps
from typing import TypeVar, Generic, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from homeapi.db import db

T = TypeVar('T')

logger = logging.getLogger(__name__)


class StoreError(Exception):
    """Falha do banco durante uma operação de repositório."""

    def __init__(self, operation: str, original: Exception):
        super().__init__(f"{operation} failed: {original}")
        self.operation = operation
        self.original = original


def store_operation(method):
    """Converte SQLAlchemyError em StoreError, desfazendo a sessão antes."""

    @wraps(method)
    def wrapper(self, *args, **kwargs):
        try:
            return method(self, *args, **kwargs)
        except SQLAlchemyError as exc:
            self.db.session.rollback()
            operation = f"{self.model_class.__tablename__}.{method.__name__}"
            logger.exception("Erro de banco em %s", operation)
            raise StoreError(operation, exc) from exc
    return wrapper


class BaseRepository(Generic[T]):

    def __init__(self, model_class):
        self.model_class = model_class
        self.db = db

    def _commit(self):
        self.db.session.commit()


class OwnedRepository(BaseRepository[T]):
    """
    Repositório de recursos que pertencem a um usuário.

    Toda operação recebe o id do dono e filtra por ele: um usuário nunca vê
    nem altera linhas de outro.
    """

    def _owned(self, user_id: int):
        return self.db.session.query(self.model_class).filter(
            self.model_class.user_id == user_id
        )

    @store_operation
    def list(self, user_id: int) -> List[T]:
        """Retorna todos os registros do usuário, na ordem natural da tabela"""
        return self._owned(user_id).order_by(self.model_class.id).all()

    @store_operation
    def get(self, user_id: int, id: int) -> Optional[T]:
        """Busca por ID dentro dos registros do usuário; None se não existir"""
        return self._owned(user_id).filter(self.model_class.id == id).first()

    @store_operation
    def create(self, obj: T) -> Optional[T]:
        """Insere e relê o registro persistido"""
        self.db.session.add(obj)
        self._commit()
        return self.get(obj.user_id, obj.id)

    @store_operation
    def update(self, user_id: int, id: int, date, value) -> Optional[T]:
        """
        Substitui data e valor. Retorna None quando nenhuma linha do usuário
        tem esse id.
        """
        affected = self._owned(user_id).filter(self.model_class.id == id).update(
            {self.model_class.date: date, self.model_class.value: value},
            synchronize_session='fetch',
        )
        self._commit()
        if affected == 0:
            return None
        return self.get(user_id, id)

    @store_operation
    def delete(self, user_id: int, id: int) -> None:
        """Remove se existir; id inexistente não é erro"""
        self._owned(user_id).filter(self.model_class.id == id).delete(
            synchronize_session='fetch'
        )
        self._commit()
