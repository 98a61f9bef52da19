import click

from homeapi.db import db
from homeapi.repositories.base_repository import StoreError
from homeapi.services.auth_service import AuthService


def register_commands(app):

    @app.cli.command("init-db")
    def init_db():
        """Cria as tabelas que ainda não existem."""
        db.create_all()
        click.echo("Banco de dados inicializado.")

    @app.cli.command("create-user")
    @click.argument("username")
    @click.argument("name")
    @click.password_option()
    def create_user(username, name, password):
        """Cria um usuário com senha."""
        try:
            user = AuthService.create_user(username, name, password)
        except (ValueError, StoreError) as exc:
            raise click.ClickException(str(exc))
        click.echo(f"Usuário {user.username} criado com id {user.id}.")
