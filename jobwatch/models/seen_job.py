from sqlalchemy import Column, Text
from jobwatch.database import Base


class SeenJob(Base):
    __tablename__ = "seen_jobs"

    job_id = Column(Text, primary_key=True)
    first_seen_at = Column(Text, nullable=False)
