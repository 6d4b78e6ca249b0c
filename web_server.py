import argparse  # Opzioni da riga di comando
import logging  # Log di avvio ed errori
import os  # Variabili del reloader di Werkzeug
import socket  # Verifica della porta prima dell'avvio
import sys  # Codice di uscita

from app import create_app  # Factory dell'app Flask
from config import ConfigError, Settings  # Impostazioni ed errori di avvio

logger = logging.getLogger("web_server")


def parse_args(argv=None, settings=None) -> argparse.Namespace:
    settings = settings or Settings()
    parser = argparse.ArgumentParser(description="Kaomoji and colors web server")
    parser.add_argument("--host", default=settings.HOST, help="Bind address")
    parser.add_argument("--port", type=int, default=settings.PORT, help="Listening port")
    parser.add_argument(
        "--log",
        action="store",
        dest="logging_level",
        type=str,
        choices=["CRITICAL", "FATAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        default="INFO",
        help="Logging level",
    )
    return parser.parse_args(argv)


def check_bind(host: str, port: int):
    # Solleva OSError se host:port non e' utilizzabile (porta occupata, permessi...)
    with socket.create_server((host, port)):
        pass


def main(argv=None) -> int:
    """Start the web server; returns a non-zero exit code if startup fails."""
    settings = Settings()
    args = parse_args(argv, settings)
    logging.basicConfig(level=getattr(logging, args.logging_level), format="[%(name)s]:%(levelname)s:%(message)s")

    try:
        app = create_app(settings)
    except ConfigError as e:
        logger.error("Cannot load static data: %s", e)  # Dati statici mancanti o malformati
        return 1

    try:
        # Il processo figlio del reloader (debug) riceve la socket gia' aperta dal padre
        if os.environ.get("WERKZEUG_RUN_MAIN") != "true":
            check_bind(args.host, args.port)
    except OSError as e:
        logger.error("Cannot start server on %s:%d: %s", args.host, args.port, e)  # Porta occupata, permessi...
        return 1

    logger.info("Your app is listening on http://%s:%d", args.host, args.port)
    try:
        app.run(host=args.host, port=args.port, debug=settings.DEBUG)
    except SystemExit as e:
        # Werkzeug gestisce da se' gli errori di bind ed esce con sys.exit(1)
        if e.code:
            logger.error("Server on %s:%d stopped with exit code %s", args.host, args.port, e.code)
            return 1
    return 0


if __name__ == '__main__':
    # Avvia il web server (porta da PORT, default 3000)
    sys.exit(main())
