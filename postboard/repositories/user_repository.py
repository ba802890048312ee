from postboard.db import db
from postboard.models.user_model import User


def get_by_email(email: str):
    return User.query.filter_by(email=email).first()


def get_by_id(user_id: int):
    return db.session.get(User, user_id)


def create_user(name, email, password_hash):
    user = User(
        name=name,
        email=email,
        password_hash=password_hash,
    )
    db.session.add(user)
    db.session.commit()
    return user


def count_users() -> int:
    return User.query.count()


def list_users(offset: int, limit: int):
    return (
        User.query
        .order_by(User.id.asc())
        .offset(offset)
        .limit(limit)
        .all()
    )
