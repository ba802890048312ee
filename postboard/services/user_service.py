from postboard.errors import NotFound
from postboard.pagination import offset_for
from postboard.repositories import post_repository, user_repository
from postboard.schemas.post_schema import PostResponseSchema
from postboard.schemas.user_schema import UserResponseSchema, UserSummarySchema


def get_users(page: int, limit: int):
    users = user_repository.list_users(offset_for(page, limit), limit)
    return {
        "count": user_repository.count_users(),
        "users": UserSummarySchema(many=True).dump(users),
        "page": page,
        "limit": limit,
    }


def get_user_with_posts(user_id: int):
    user = user_repository.get_by_id(user_id)
    if not user:
        raise NotFound("User not found")

    payload = UserResponseSchema().dump(user)
    payload["createdAt"] = user.created_at.isoformat()
    payload["posts"] = PostResponseSchema(many=True, exclude=("author",)).dump(
        post_repository.list_posts_by_author(user.id)
    )
    return payload
