"""User model."""

from sqlalchemy import Column, String

from .base import Base, new_id


class User(Base):
    __tablename__ = "users"
    id = Column(String(32), primary_key=True, default=new_id)
    username = Column(String(10), unique=True, nullable=False)

    def to_dict(self) -> dict:
        return {"id": self.id, "username": self.username}
