import logging

from battlesnake import BattlesnakeLogic
from config import load_settings
from main import create_battlesnake_server


def main():
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )
    logging.getLogger('werkzeug').setLevel(logging.ERROR)

    app = create_battlesnake_server(BattlesnakeLogic(settings))
    logging.getLogger(__name__).info(
        "Battlesnake server running at http://%s:%d", settings.host, settings.port)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()
