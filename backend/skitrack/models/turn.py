from sqlalchemy import Column, Float, ForeignKey, Integer, String
from skitrack.db import Base


class Turn(Base):
    __tablename__ = "turns"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True)

    # Declared only; SQLite checks it when ENFORCE_FOREIGN_KEYS is on
    run_id = Column(Integer, ForeignKey("runs.id"), nullable=False, index=True)

    direction = Column(String, nullable=False)  # left, right
    parallelness = Column(Float, nullable=False)
    closeness = Column(Float, nullable=False)
    smoothness = Column(String, nullable=False)  # smooth, abrupt

    timestamp_start = Column(String, nullable=False)
    timestamp_end = Column(String, nullable=False)
