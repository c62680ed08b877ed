import logging
from typing import Optional

from flask import Flask, jsonify, request

from battlesnake import BattlesnakeLogic
from config import Settings, load_settings
from snapshot import GameStateError

logger = logging.getLogger(__name__)


def create_battlesnake_server(logic: Optional[BattlesnakeLogic] = None,
                              settings: Optional[Settings] = None) -> Flask:
    """Create Flask server for Battlesnake"""
    if logic is None:
        logic = BattlesnakeLogic(settings or load_settings())

    app = Flask(__name__)

    @app.route('/')
    def info():
        return jsonify(logic.info())

    @app.route('/start', methods=['POST'])
    def start():
        logic.on_game_start(request.get_json(silent=True))
        return "ok"

    @app.route('/move', methods=['POST'])
    def move():
        return jsonify({"move": logic.get_move(request.get_json(silent=True))})

    @app.route('/end', methods=['POST'])
    def end():
        logic.on_game_end(request.get_json(silent=True))
        return "ok"

    # Health check endpoint
    @app.route('/health')
    def health():
        return jsonify({"status": "healthy"})

    @app.errorhandler(GameStateError)
    def bad_game_state(e):
        logger.warning("Rejected game state: %s", e)
        return jsonify({"error": str(e)}), 400

    @app.after_request
    def identify_server(response):
        response.headers.set("server", "battlesnake/lethal-lora")
        return response

    return app
