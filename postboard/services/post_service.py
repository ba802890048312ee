import logging

from postboard.db import db
from postboard.errors import BadRequest, NotFound, StorageError, Unauthorized
from postboard.pagination import offset_for
from postboard.repositories import post_repository
from postboard.schemas.post_schema import PostResponseSchema
from postboard.services import storage_service


logger = logging.getLogger(__name__)


def get_posts(page: int, limit: int):
    posts = post_repository.list_posts(offset_for(page, limit), limit)
    return {
        "count": post_repository.count_posts(),
        "posts": PostResponseSchema(many=True).dump(posts),
        "page": page,
        "limit": limit,
    }


def get_posts_by_author(author_id: int):
    posts = post_repository.list_posts_by_author(author_id)
    return PostResponseSchema(many=True, exclude=("author",)).dump(posts)


def _discard_object(object_name: str) -> None:
    try:
        storage_service.delete_object(object_name)
    except StorageError:
        logger.warning("storage_object_orphaned object=%s", object_name, exc_info=True)


def create_post(author_id: int, file_storage, title: str, content: str):
    """Upload the attached image and persist a post that references it.

    The upload is staged to a temporary file that is removed whether or not
    the upload succeeds. If the post cannot be stored after a successful
    upload, the uploaded object is removed again.
    """
    if file_storage is None or not getattr(file_storage, "filename", ""):
        raise BadRequest("No file uploaded")

    object_name = storage_service.build_object_name(file_storage.filename)
    with storage_service.staged_upload(file_storage) as staged_path:
        storage_service.upload_file(
            staged_path,
            object_name,
            content_type=file_storage.mimetype,
        )

    try:
        post = post_repository.create_post(
            author_id=author_id,
            title=title,
            content=content,
            image_id=object_name,
        )
    except Exception:
        db.session.rollback()
        _discard_object(object_name)
        raise

    logger.info("post_created post_id=%s author_id=%s", post.id, author_id)
    return post


def delete_post(post_id: int, requester_id: int) -> None:
    post = post_repository.get_by_id(post_id)
    if not post:
        raise NotFound("Post not found")

    if post.author_id != requester_id:
        logger.info(
            "post_delete_denied post_id=%s requester_id=%s", post_id, requester_id
        )
        raise Unauthorized("Unauthorized")

    image_id = post.image_id
    post_repository.delete_post(post)
    logger.info("post_deleted post_id=%s author_id=%s", post_id, requester_id)

    _discard_object(image_id)
