import socket
from pathlib import Path

from store_browser.runtime import DEFAULT_PORT, RuntimeSettings, pick_port


def test_settings_defaults_with_empty_environment():
    settings = RuntimeSettings.from_env({})

    assert settings.port == DEFAULT_PORT
    assert settings.debug is False
    assert settings.config_root == Path("config")


def test_settings_read_from_environment():
    settings = RuntimeSettings.from_env(
        {"PORT": "9000", "DEBUG": "1", "STORE_BROWSER_CONFIG_ROOT": "/srv/cfg"}
    )

    assert settings.port == 9000
    assert settings.debug is True
    assert settings.config_root == Path("/srv/cfg")


def test_pick_port_skips_busy_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as busy:
        busy.bind(("127.0.0.1", 0))
        busy.listen(1)
        taken = busy.getsockname()[1]

        port = pick_port(taken, attempts=5)

    assert port != taken
    assert taken < port < taken + 5


def test_pick_port_keeps_free_port():
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as sock:
        sock.bind(("127.0.0.1", 0))
        free = sock.getsockname()[1]

    assert pick_port(free, attempts=1) == free
