"""Exercise model — one logged activity, back-referencing its user.

user_id is a plain indexed column; the owning user is checked by lookup
before insert, not by a foreign key.
"""

import datetime

from sqlalchemy import Column, Date, Index, Integer, String

from .base import Base, new_id


class Exercise(Base):
    __tablename__ = "exercises"
    id = Column(String(32), primary_key=True, default=new_id)
    user_id = Column(String(32), nullable=False)
    description = Column(String(100), nullable=False)
    duration = Column(Integer, nullable=False)  # minutes, 1..1440
    date = Column(Date, nullable=False, default=datetime.date.today)

    __table_args__ = (Index("ix_exercises_user_date", "user_id", "date"),)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "description": self.description,
            "duration": self.duration,
            "date": self.date.isoformat() if self.date else None,
        }

    def to_log_entry(self) -> dict:
        return {
            "userId": self.user_id,
            "description": self.description,
            "date": self.date.isoformat() if self.date else None,
            "duration": self.duration,
        }
