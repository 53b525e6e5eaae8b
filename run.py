# Точка входа ДЛЯ РАЗРАБОТКИ (debug server)
# В продакшене использовать wsgi.py + gunicorn (см. deploy/gunicorn.conf.py).

"""Точка входа для запуска Flask‑приложения.

Конфигурация выбирается по переменной окружения:

- ``APP_ENV=production`` или ``FLASK_ENV=production`` → ProductionConfig
- во всех остальных случаях используется DevelopmentConfig.

Порт берётся из ``PORT`` (по умолчанию 3000).
"""

import logging
import os

from env_loader import load_dotenv_like

# Load .env if present (так запуск из IDE подхватывает конфиг)
load_dotenv_like()

from marine_relay import create_app
from marine_relay.config import DevelopmentConfig, ProductionConfig


def _select_config_class() -> type:
    """Выбрать класс конфигурации в зависимости от окружения.

    Приоритет имеет переменная ``APP_ENV``, затем ``FLASK_ENV``.
    Любое значение, начинающееся с ``prod``, даёт :class:`ProductionConfig`.
    """
    env = (os.getenv('APP_ENV') or os.getenv('FLASK_ENV') or 'development').lower()
    if env.startswith('prod'):
        return ProductionConfig
    return DevelopmentConfig


def main() -> None:
    app = create_app(_select_config_class())
    port = int(app.config.get('PORT', 3000))

    # Перезагрузчик Werkzeug запускает два процесса, пишем только из рабочего
    if not app.debug or os.environ.get('WERKZEUG_RUN_MAIN') == 'true':
        logging.getLogger(__name__).info('Server running at http://localhost:%s', port)

    # Каждый запрос обслуживается в своём потоке
    app.run(host='0.0.0.0', port=port, debug=app.config.get('DEBUG', True), threaded=True)


if __name__ == '__main__':
    main()
