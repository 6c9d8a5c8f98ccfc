from sqlalchemy import Column, Integer, String
from skitrack.db import Base


class Run(Base):
    __tablename__ = "runs"
    # AUTOINCREMENT so ids are never handed out twice
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)

    # RFC 3339 text, stored as written and parsed on read
    start_time = Column(String, nullable=False)
    end_time = Column(String, nullable=False)

    # SVG path of the ground track, e.g. "M 0 50 C 25 25, 75 75, 100 50"
    path = Column(String, nullable=False)
