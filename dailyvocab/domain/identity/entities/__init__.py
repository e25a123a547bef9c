from .user import Learner, Role, User

__all__ = ["Learner", "Role", "User"]
