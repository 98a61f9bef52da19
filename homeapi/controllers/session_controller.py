# homeapi/controllers/session_controller.py
from flask import jsonify, request, session
from flask_login import login_user, logout_user, current_user

from homeapi.services.auth_service import AuthService
from homeapi.views.forms import LoginForm


def login_controller():
    form = LoginForm.from_json(request.get_json(silent=True))
    if not form.validate():
        return jsonify({'error': ", ".join(form.error_messages())}), 422

    user = AuthService.verify(form.username.data, form.password.data)
    if user is None:
        return jsonify({'error': 'Incorrect username or password'}), 401

    login_user(user)
    return jsonify(user.to_dict()), 200


def current_session_controller():
    if current_user.is_authenticated:
        return jsonify(current_user.to_dict()), 200
    return jsonify({'error': 'Not authenticated'}), 401


def logout_controller():
    logout_user()
    # descarta o cookie de sessão inteiro, não só o id do usuário
    session.clear()
    return jsonify({}), 200
