from sqlalchemy import BigInteger, Column, Integer, String
from student_manage.database.base import Base


class Sequence(Base):
    """Named counter; ``seq`` holds the last value handed out."""

    __tablename__ = "sequences"

    id = Column(Integer, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    seq = Column(BigInteger, nullable=False, default=0)
