# homeapi/controllers/resource_controller.py
import logging
from functools import wraps

from flask import jsonify, request

from homeapi.repositories.base_repository import StoreError
from homeapi.services.resource_service import ResourceService
from homeapi.views.forms import CREATE_FORMS, UPDATE_FORMS, INVALID_VALUE, parse_path_id

logger = logging.getLogger(__name__)


def read_operation(controller):
    """Qualquer falha numa leitura vira 500 com corpo vazio."""

    @wraps(controller)
    def wrapper(service: ResourceService, *args, **kwargs):
        try:
            return controller(service, *args, **kwargs)
        except Exception:
            logger.exception("Erro na leitura de %s", service.family)
            return "", 500
    return wrapper


def _validation_error(messages):
    # uma única string com todas as mensagens
    return jsonify({'error': ", ".join(messages)}), 422


@read_operation
def list_controller(service: ResourceService, user_id: int):
    return jsonify(service.list(user_id))


@read_operation
def latest_controller(service: ResourceService, user_id: int):
    result = service.get_latest(user_id)
    if result is None:
        return jsonify({'error': service.latest_not_found_message}), 404
    return jsonify(result)


@read_operation
def get_controller(service: ResourceService, user_id: int, raw_id):
    item_id = parse_path_id(raw_id)
    if item_id is None:
        return jsonify({'error': service.not_found_message}), 404
    result = service.get(user_id, item_id)
    if result is None:
        return jsonify({'error': service.not_found_message}), 404
    return jsonify(result)


def create_controller(service: ResourceService, user_id: int):
    form = CREATE_FORMS[service.family].from_json(request.get_json(silent=True))
    if not form.validate():
        return _validation_error(form.error_messages())

    try:
        result = service.create(user_id, form.value.data, form.date.data)
    except StoreError:
        return jsonify({'error': f"Database error during the creation of new {service.label}"}), 503
    return jsonify(result)


def update_controller(service: ResourceService, user_id: int, raw_id):
    form = UPDATE_FORMS[service.family].from_json(request.get_json(silent=True))
    item_id = parse_path_id(raw_id)

    messages = []
    if item_id is None:
        messages.append(f"params[id]: {INVALID_VALUE}")
    if not form.validate():
        messages.extend(form.error_messages())
    if messages:
        return _validation_error(messages)

    if form.id.data != item_id:
        return jsonify({'error': 'URL and body id mismatch'}), 422

    try:
        result = service.update(user_id, item_id, form.value.data, form.date.data)
    except StoreError:
        return jsonify({'error': f"Database error during the update of {service.label} {raw_id}"}), 503
    if result is None:
        return jsonify({'error': service.not_found_message}), 404
    return jsonify(result)


def delete_controller(service: ResourceService, user_id: int, raw_id):
    item_id = parse_path_id(raw_id)
    try:
        # id que não existe (ou nem é número) conta como removido
        if item_id is not None:
            service.delete(user_id, item_id)
    except StoreError:
        return jsonify({'error': f"Database error during the deletion of {service.label} {raw_id}"}), 503
    return jsonify({}), 200
