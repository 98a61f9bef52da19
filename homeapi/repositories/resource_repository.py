from typing import Optional

from sqlalchemy import desc

from homeapi.models import Temperature, Switch, Light
from homeapi.repositories.base_repository import OwnedRepository, store_operation


class TemperatureRepository(OwnedRepository[Temperature]):

    def __init__(self):
        super().__init__(Temperature)

    @store_operation
    def get_latest(self, user_id: int) -> Optional[Temperature]:
        """Retorna a leitura mais recente do usuário"""
        return self._owned(user_id).order_by(
            desc(Temperature.date), desc(Temperature.id)
        ).first()


class SwitchRepository(OwnedRepository[Switch]):

    def __init__(self):
        super().__init__(Switch)


class LightRepository(OwnedRepository[Light]):

    def __init__(self):
        super().__init__(Light)
