from sqlalchemy import CheckConstraint, Column, Integer, Text
from jobwatch.database import Base


class Snapshot(Base):
    __tablename__ = "snapshots"
    __table_args__ = (CheckConstraint("id = 1"),)

    id = Column(Integer, primary_key=True)
    updated_at = Column(Text, nullable=False)
    jobs = Column(Text, nullable=False)
    new_jobs = Column(Text, nullable=False)
