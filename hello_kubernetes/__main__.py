from hello_kubernetes.app import create_app
from hello_kubernetes.config import Config


def main(argv=None):
    """Starts the server; argv is accepted for the entry point and ignored."""
    config = Config.from_env()
    app = create_app(config)
    app.logger.info(f"Starting server on {config.host}:{config.port}")
    # Werkzeug exits with status 1 if the port cannot be bound.
    app.run(host=config.host, port=config.port)


if __name__ == "__main__":
    main()
