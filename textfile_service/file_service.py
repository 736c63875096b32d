import os

from flask import (
    Blueprint, Flask, Response, current_app, jsonify, render_template, request,
)
from werkzeug.exceptions import HTTPException

from . import config, storage
from .errors import InternalError, MethodError, RouteError, TextFileError, ValidationError
from .middleware import LowercasePathMiddleware
from .names import path_for

ORGANIZER_PAGE = "organizer.html"

api = Blueprint("textfile_api", __name__)


def _root() -> str:
    return current_app.config["STORAGE_DIR"]


def _target() -> str:
    return path_for(request.args.get("filename"), _root())


def plain_text(status: int, reason: str, message: str) -> Response:
    return Response(f"{status} - {reason} - {message}", status=status, mimetype="text/plain")


def ok(message: str) -> Response:
    return plain_text(200, "OK", message)


def error_response(error: TextFileError) -> Response:
    return plain_text(error.status_code, error.reason, error.message)


@api.before_request
def only_get():
    # HEAD and OPTIONS are added to every GET rule by werkzeug
    if request.method != "GET":
        raise MethodError("Only GET allowed")


@api.route("/all")
def list_files():
    return jsonify(storage.list_files(_root()))


@api.route("/new")
def create_file():
    path = _target()
    storage.create_file(path, request.args.get("data", ""))
    return ok(f"Created file {os.path.basename(path)}")


@api.route("/read")
def read_file():
    content = storage.read_file(_target())
    return Response(content, status=200, mimetype="text/plain")


@api.route("/append")
def append_file():
    path = _target()
    data = request.args.get("data")
    if data is None:
        raise ValidationError("Missing data parameter")
    storage.append_file(path, data)
    return ok(f"Appended data to file {os.path.basename(path)}")


@api.route("/remove")
def remove_file():
    path = _target()
    storage.delete_file(path)
    return ok(f"Deleted file {os.path.basename(path)}")


def organizer():
    return render_template(ORGANIZER_PAGE, base_url=current_app.config["BASE_URL"])


def handle_service_error(error: TextFileError):
    return error_response(error)


def handle_http_error(error: HTTPException):
    if error.code == 404:
        return error_response(RouteError("Route not found"))
    if error.code == 405:
        return error_response(MethodError("Only GET allowed"))
    return plain_text(error.code, error.name, error.description)


def handle_unexpected_error(error: Exception):
    current_app.logger.exception("Unhandled error on %s", request.path)
    return error_response(InternalError("Unexpected server error"))


def create_app(test_config=None) -> Flask:
    """
    Build the Flask application serving the text file API under
    ``BASE_URL`` and the organizer page at ``/``.

    ``test_config`` overrides the values read from :mod:`config`.
    """
    app = Flask(__name__, static_folder=None)
    app.config.from_mapping(
        STORAGE_DIR=config.STORAGE_DIR,
        BASE_URL=config.BASE_URL,
    )
    if test_config is not None:
        app.config.from_mapping(test_config)

    app.config["STORAGE_DIR"] = os.path.abspath(app.config["STORAGE_DIR"])
    app.config["BASE_URL"] = config.normalize_base_url(app.config["BASE_URL"])
    os.makedirs(app.config["STORAGE_DIR"], exist_ok=True)   # create it if it does not exist

    app.register_blueprint(api, url_prefix=app.config["BASE_URL"])
    app.add_url_rule("/", "organizer", organizer, methods=["GET"])

    app.register_error_handler(TextFileError, handle_service_error)
    app.register_error_handler(HTTPException, handle_http_error)
    app.register_error_handler(Exception, handle_unexpected_error)

    app.wsgi_app = LowercasePathMiddleware(app.wsgi_app)

    app.logger.info(
        "Serving %s under %s", app.config["STORAGE_DIR"], app.config["BASE_URL"]
    )
    return app
