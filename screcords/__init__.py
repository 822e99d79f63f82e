from flask import Flask

from .settings import Settings
from .routers.records import bp as records_bp


def create_app(config_data: dict | None = None) -> Flask:
    app = Flask(__name__)

    settings = Settings.model_validate(config_data or {"stores": [{"name": "local"}]})
    app.config["SETTINGS"] = settings

    # Blueprints
    app.register_blueprint(records_bp, url_prefix="/records")

    return app
