from postboard.models.post_model import Post
from postboard.models.user_model import User

__all__ = ["Post", "User"]
