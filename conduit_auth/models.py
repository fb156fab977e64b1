from sqlalchemy import Column, Integer, String, Boolean
from .db import Base


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, unique=True, index=True, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    # bcrypt hash, never the plaintext
    password = Column(String, nullable=False)
    bio = Column(String, nullable=True)
    image = Column(String, nullable=True)
    demo = Column(Boolean, default=False, nullable=False)

    def to_dict(self) -> dict:
        """
        Serialize the public profile fields of a user.

        Returns:
            Dictionary with email, username, bio and image. The id,
            password hash and demo flag are never included.
        """
        return {
            "email": self.email,
            "username": self.username,
            "bio": self.bio,
            "image": self.image,
        }
