import logging

from flask import Flask, jsonify
from flask_cors import CORS
from config import get_config
from controllers.game_controller import router as game_routes
from database import Base, engine

config = get_config()

logging.basicConfig(
    level=config.log_level,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)


def create_app() -> Flask:
    Base.metadata.create_all(bind=engine)

    app = Flask(__name__)
    CORS(app, origins=config.allowed_origins)
    app.register_blueprint(game_routes, url_prefix="/api")

    @app.get("/health")
    def health():
        return jsonify({"status": "ok"})

    return app


if __name__ == "__main__":
    create_app().run(debug=config.debug)
