from marshmallow import EXCLUDE, pre_load, validate

from postboard.extensions.extensions import ma
from postboard.models.post_model import Post
from postboard.models.user_model import User
from postboard.services.storage_service import build_object_url


class PostCreateSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    title = ma.Str(
        required=True,
        validate=validate.Length(min=1, error="Title is required"),
        error_messages={
            "required": "Title is required",
            "null": "Title is required",
            "invalid": "Title must be a string",
        },
    )
    content = ma.Str(
        required=True,
        validate=validate.Length(min=1, error="Content is required"),
        error_messages={
            "required": "Content is required",
            "null": "Content is required",
            "invalid": "Content must be a string",
        },
    )

    @pre_load
    def strip_whitespace(self, data, **kwargs):
        return {
            key: value.strip() if isinstance(value, str) else value
            for key, value in data.items()
        }


class PostAuthorSchema(ma.SQLAlchemySchema):
    class Meta:
        model = User

    name = ma.auto_field()
    email = ma.auto_field()


class PostResponseSchema(ma.SQLAlchemySchema):
    class Meta:
        model = Post

    id = ma.auto_field()
    title = ma.auto_field()
    content = ma.auto_field()
    image_id = ma.Method("get_image_url", data_key="imageId")
    created_at = ma.auto_field(data_key="createdAt")
    author_id = ma.auto_field(data_key="authorId")
    author = ma.Nested(PostAuthorSchema)

    def get_image_url(self, post):
        return build_object_url(post.image_id)
