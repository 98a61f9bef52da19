# homeapi/services/auth_service.py
import logging
from typing import Optional

from homeapi.models import User
from homeapi.repositories.user_repository import UserRepository

repository = UserRepository()

logger = logging.getLogger(__name__)


class AuthService:

    @staticmethod
    def verify(username: str, password: str) -> Optional[User]:
        """
        Retorna o usuário se a senha conferir, senão None.
        Usuário inexistente e senha errada dão o mesmo resultado.
        """
        user = repository.get_by_username(username)
        if user is None or not user.check_password(password):
            logger.info("Falha de login para '%s'", username)
            return None
        return user

    @staticmethod
    def load_user(user_id: int) -> Optional[User]:
        return repository.get_by_id(user_id)

    @staticmethod
    def create_user(username: str, name: str, password: str) -> User:
        """Cria um usuário. Levanta ValueError se o username já existir."""
        if repository.get_by_username(username) is not None:
            raise ValueError(f"Username '{username}' is already taken")
        user = User(username=username, name=name)
        user.set_password(password)
        return repository.create(user)
