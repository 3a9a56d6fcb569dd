# dice_duel/__init__.py
import os

from flask import Flask
from flask_socketio import SocketIO

from .routes import duel_bp
from .sockets import register_duel_socket_handlers


def init_duel(app, socketio):
    app.register_blueprint(duel_bp)
    register_duel_socket_handlers(socketio)


def create_app(config=None):
    """Standalone hot-seat server: a Flask app with the duel wired in."""
    app = Flask(__name__)
    app.config["SECRET_KEY"] = os.environ.get("DICE_DUEL_SECRET_KEY") or os.urandom(24).hex()
    if config:
        app.config.update(config)
    socketio = SocketIO(app)
    init_duel(app, socketio)
    return app, socketio
