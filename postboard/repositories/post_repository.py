from sqlalchemy.orm import joinedload

from postboard.db import db
from postboard.models.post_model import Post


def _newest_first(query):
    return query.order_by(Post.created_at.desc(), Post.id.desc())


def create_post(author_id, title, content, image_id):
    post = Post(
        author_id=author_id,
        title=title,
        content=content,
        image_id=image_id,
    )
    db.session.add(post)
    db.session.commit()
    return post


def get_by_id(post_id: int):
    return db.session.get(Post, post_id)


def count_posts() -> int:
    return Post.query.count()


def list_posts(offset: int, limit: int):
    query = Post.query.options(joinedload(Post.author))
    return _newest_first(query).offset(offset).limit(limit).all()


def list_posts_by_author(author_id: int):
    query = Post.query.filter(Post.author_id == author_id)
    return _newest_first(query).all()


def delete_post(post):
    db.session.delete(post)
    db.session.commit()
