# homeapi/services/resource_service.py
import logging
from datetime import datetime, timezone
from typing import Optional, Dict, Any, List

from homeapi.models import Temperature, Switch, Light
from homeapi.repositories.base_repository import OwnedRepository
from homeapi.repositories.resource_repository import (
    TemperatureRepository, SwitchRepository, LightRepository,
)

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Hora atual em UTC, sem tzinfo e sem microssegundos."""
    return datetime.now(timezone.utc).replace(tzinfo=None, microsecond=0)


class ResourceService:
    """
    Casos de uso de uma família de recursos (temperatures, switches, lights).

    Os métodos devolvem dicionários prontos para JSON ou None quando o
    registro não existe para aquele usuário. StoreError sobe sem tratamento.
    """

    def __init__(self, family: str, label: str, model_class, repository: OwnedRepository,
                 not_found_message: str, latest_not_found_message: Optional[str] = None):
        self.family = family
        self.label = label
        self.model_class = model_class
        self.repository = repository
        self.not_found_message = not_found_message
        self.latest_not_found_message = latest_not_found_message

    @property
    def supports_latest(self) -> bool:
        return hasattr(self.repository, "get_latest")

    def list(self, user_id: int) -> List[Dict[str, Any]]:
        return [obj.to_dict() for obj in self.repository.list(user_id)]

    def get(self, user_id: int, item_id: int) -> Optional[Dict[str, Any]]:
        obj = self.repository.get(user_id, item_id)
        return obj.to_dict() if obj else None

    def get_latest(self, user_id: int) -> Optional[Dict[str, Any]]:
        obj = self.repository.get_latest(user_id)
        return obj.to_dict() if obj else None

    def create(self, user_id: int, value, date: Optional[datetime] = None) -> Dict[str, Any]:
        # o dono vem sempre da sessão, nunca do corpo da requisição
        obj = self.model_class(date=date or utc_now(), value=value, user_id=user_id)
        created = self.repository.create(obj)
        logger.info("%s criado: %s", self.label, created)
        return created.to_dict()

    def update(self, user_id: int, item_id: int, value,
               date: Optional[datetime] = None) -> Optional[Dict[str, Any]]:
        obj = self.repository.update(user_id, item_id, date or utc_now(), value)
        if obj is None:
            return None
        logger.info("%s atualizado: %s", self.label, obj)
        return obj.to_dict()

    def delete(self, user_id: int, item_id: int) -> None:
        self.repository.delete(user_id, item_id)


temperature_service = ResourceService(
    "temperatures", "temperature", Temperature, TemperatureRepository(),
    not_found_message="Temperature not found.",
    latest_not_found_message="There is no temperature for this sensor!",
)
switch_service = ResourceService(
    "switches", "switch", Switch, SwitchRepository(),
    not_found_message="Switch not found.",
)
light_service = ResourceService(
    "lights", "light", Light, LightRepository(),
    not_found_message="Light not found.",
)

RESOURCE_SERVICES = [temperature_service, switch_service, light_service]
