from flask import Blueprint

from homeapi.controllers.session_controller import (
    login_controller, current_session_controller, logout_controller,
)

session_bp = Blueprint('sessions', __name__, url_prefix='/api/sessions')


@session_bp.route('', methods=['POST'])
def login():
    return login_controller()


@session_bp.route('/current', methods=['GET'])
def current():
    return current_session_controller()


@session_bp.route('/current', methods=['DELETE'])
def logout():
    return logout_controller()
