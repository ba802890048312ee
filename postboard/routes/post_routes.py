from flask import Blueprint, jsonify, request
from flask_jwt_extended import jwt_required

from postboard.pagination import pagination_args
from postboard.schemas.post_schema import PostCreateSchema
from postboard.security import current_user_id
from postboard.services import post_service
from postboard.validation import load_or_raise


post_bp = Blueprint("posts", __name__)

UPLOAD_FIELD_NAMES = ("foto", "file", "image")


def _uploaded_file():
    for field_name in UPLOAD_FIELD_NAMES:
        file = request.files.get(field_name)
        if file and file.filename:
            return file
    return None


@post_bp.route("/posts", methods=["GET"])
@jwt_required()
def list_posts():
    page, limit = pagination_args()
    return jsonify(post_service.get_posts(page, limit)), 200


@post_bp.route("/my-posts", methods=["GET"])
@jwt_required()
def list_my_posts():
    return jsonify(post_service.get_posts_by_author(current_user_id())), 200


@post_bp.route("/posts", methods=["POST"])
@jwt_required()
def create_post():
    author_id = current_user_id()
    file = _uploaded_file()
    if file is None:
        return jsonify({"error": "No file uploaded"}), 400

    payload = load_or_raise(PostCreateSchema(), request.form.to_dict())
    post_service.create_post(author_id, file, payload["title"], payload["content"])
    return "", 201


@post_bp.route("/posts/<int:post_id>", methods=["DELETE"])
@jwt_required()
def delete_post(post_id):
    post_service.delete_post(post_id, current_user_id())
    return "OK", 200, {"Content-Type": "text/plain; charset=utf-8"}
