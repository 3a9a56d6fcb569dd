# dice_duel/__main__.py
import argparse
import logging

from . import create_app


def main():
    parser = argparse.ArgumentParser(description="Run the hot-seat dice duel server.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=5000)
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)
    app, socketio = create_app()
    socketio.run(app, host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()
