# run.py
import logging

from config import DevelopmentConfig
from homeapi.app import create_app

app = create_app(DevelopmentConfig)

logger = logging.getLogger(__name__)

if __name__ == '__main__':
    logger.info("Servidor em http://%s:%s/", app.config["HOST"], app.config["PORT"])
    # use_reloader=False evita duplicar processos
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=True, use_reloader=False)
