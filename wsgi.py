"""WSGI-энтрипоинт для прод-окружения.

Используется gunicorn:
    gunicorn -c deploy/gunicorn.conf.py wsgi:app
"""

import os

from env_loader import load_dotenv_like

# Load .env if present
load_dotenv_like()

from marine_relay import create_app
from marine_relay.config import DevelopmentConfig, ProductionConfig, TestingConfig


def get_config_class():
    cfg_name = os.environ.get("APP_CONFIG", "production").lower()
    if cfg_name in {"dev", "development"}:
        return DevelopmentConfig
    if cfg_name in {"test", "testing"}:
        return TestingConfig
    return ProductionConfig


app = create_app(get_config_class())


if __name__ == "__main__":
    # Небольшой запуск для локальной проверки WSGI-энтрипоинта
    app.run(host="0.0.0.0", port=int(app.config["PORT"]), threaded=True)
