"""
Run the text file service.

    python -m textfile_service --port 3000 --storage ./storage
"""
import argparse
import logging

from . import config
from .file_service import create_app


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="textfile-service",
        description="HTTP API over the .txt files of one directory",
    )
    parser.add_argument("--host", default=config.HOST, help="interface to bind (default: %(default)s)")
    parser.add_argument("--port", type=int, default=config.PORT, help="port to listen on (default: %(default)s)")
    parser.add_argument("--storage", default=config.STORAGE_DIR, help="directory holding the files (default: %(default)s)")
    parser.add_argument("--base-url", default=config.BASE_URL, help="prefix of the API routes (default: %(default)s)")
    parser.add_argument("--log-level", default=config.LOG_LEVEL, help="logging level (default: %(default)s)")
    parser.add_argument("--debug", action="store_true", help="run Flask in debug mode")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = create_app({
        "STORAGE_DIR": args.storage,
        "BASE_URL": args.base_url,
    })
    app.run(host=args.host, port=args.port, debug=args.debug, threaded=True)


if __name__ == "__main__":
    main()
