from typing import Optional

from homeapi.models import User
from homeapi.repositories.base_repository import BaseRepository, store_operation


class UserRepository(BaseRepository[User]):

    def __init__(self):
        super().__init__(User)

    def get_by_id(self, id: int) -> Optional[User]:
        return self.db.session.get(User, id)

    def get_by_username(self, username: str) -> Optional[User]:
        return self.db.session.query(User).filter(User.username == username).first()

    @store_operation
    def create(self, user: User) -> User:
        self.db.session.add(user)
        self._commit()
        return user
