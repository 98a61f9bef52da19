from flask import Blueprint
from flask_login import login_required, current_user

from homeapi.controllers.resource_controller import (
    list_controller, latest_controller, get_controller,
    create_controller, update_controller, delete_controller,
)
from homeapi.services.resource_service import ResourceService


def create_resource_blueprint(service: ResourceService) -> Blueprint:
    """Monta as rotas CRUD de uma família em /api/<family>."""
    bp = Blueprint(service.family, __name__, url_prefix=f"/api/{service.family}")

    @bp.route('', methods=['GET'])
    @login_required
    def list_items():
        return list_controller(service, current_user.id)

    if service.supports_latest:
        # rota fixa, tem prioridade sobre /<item_id>
        @bp.route('/last', methods=['GET'])
        @login_required
        def latest_item():
            return latest_controller(service, current_user.id)

    @bp.route('/<item_id>', methods=['GET'])
    @login_required
    def get_item(item_id):
        return get_controller(service, current_user.id, item_id)

    @bp.route('', methods=['POST'])
    @login_required
    def create_item():
        return create_controller(service, current_user.id)

    @bp.route('/<item_id>', methods=['PUT'])
    @login_required
    def update_item(item_id):
        return update_controller(service, current_user.id, item_id)

    @bp.route('/<item_id>', methods=['DELETE'])
    @login_required
    def delete_item(item_id):
        return delete_controller(service, current_user.id, item_id)

    return bp
