from sqlalchemy import Column, Integer, String, Date

from ..core.database import Base

DESCRIPTION_MAX_LENGTH = 2000


class Activity(Base):
    __tablename__ = "activities"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String, nullable=False)
    description = Column(String(DESCRIPTION_MAX_LENGTH), nullable=True)
    category = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    duration_minutes = Column(Integer, nullable=False)

    def __repr__(self):
        return f"<Activity id={self.id} name={self.name!r} date={self.date}>"
