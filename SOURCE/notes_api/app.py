"""
Flask application factory for the development notes API.
"""

from __future__ import annotations

from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS

from .config import Settings, get_settings
from .database import init_engine
from .models import Base
from .routes import api_bp


def create_app(settings: Optional[Settings] = None) -> Flask:
    settings = settings or get_settings()

    app = Flask(__name__)
    app.config["SECRET_KEY"] = settings.secret_key

    CORS(app)

    engine = init_engine(settings.database_url, echo=settings.debug)
    Base.metadata.create_all(bind=engine)

    app.register_blueprint(api_bp)

    @app.get("/health")
    def health():
        return jsonify({"status": "ok"})

    return app


__all__ = ["create_app"]
