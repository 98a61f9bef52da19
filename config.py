# /config.py
import os

from dotenv import load_dotenv

# Carregar variáveis do .env
load_dotenv()

# Caminho base do projeto
basedir = os.path.abspath(os.path.dirname(__file__))
db_path = os.path.join(basedir, "homeapi", "db")


def _split_origins(value):
    return [origin.strip() for origin in value.split(",") if origin.strip()]


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or "troque-esta-chave-em-producao"
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        f"sqlite:///{os.path.join(db_path, 'app.db')}"

    # o cliente web roda em outra porta e envia o cookie de sessão
    CORS_ORIGINS = _split_origins(os.environ.get('CORS_ORIGINS', 'http://localhost:3000'))

    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')

    HOST = os.environ.get('HOST', '127.0.0.1')
    PORT = int(os.environ.get('PORT', 3001))


class DevelopmentConfig(Config):
    DEBUG = True


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SECRET_KEY = "testing"
    LOG_LEVEL = 'WARNING'
