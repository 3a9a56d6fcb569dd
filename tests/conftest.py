import pytest

from dice_duel import create_app, state


@pytest.fixture(autouse=True)
def clean_registry():
    state.clear()
    yield
    state.clear()


@pytest.fixture
def app_and_socketio():
    return create_app({"TESTING": True})


@pytest.fixture
def client(app_and_socketio):
    app, _ = app_and_socketio
    return app.test_client()


@pytest.fixture
def socket_client(app_and_socketio):
    app, socketio = app_and_socketio
    sc = socketio.test_client(app)
    yield sc
    if sc.is_connected():
        sc.disconnect()
