from flask import Blueprint


main_bp = Blueprint("main", __name__)


@main_bp.route("/healthcheck", methods=["GET"])
def healthcheck():
    return "OK", 200, {"Content-Type": "text/plain; charset=utf-8"}
