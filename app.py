from store_browser.logging_config import configure_logging
from store_browser.runtime import RuntimeSettings, pick_port
from store_browser.ui.dash_app import create_dash_app

configure_logging()

settings = RuntimeSettings.from_env()
app = create_dash_app(settings.config_root)
server = app.server  # WSGI entry point: gunicorn app:server


def main() -> None:
    port = pick_port(settings.port)
    app.run(host=settings.host, port=port, debug=settings.debug)


if __name__ == "__main__":
    main()
