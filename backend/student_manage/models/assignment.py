from sqlalchemy import BigInteger, Column, Date, Integer, String, UniqueConstraint
from student_manage.database.base import Base

class Assignment(Base):
    __tablename__ = "assignmentDetails"
    __table_args__ = (
        UniqueConstraint("unique_no", name="uq_assignment_unique_no"),
    )

    id = Column(Integer, primary_key=True)
    title = Column(String, nullable=True)
    description = Column(String, nullable=True)
    due_date = Column(Date, nullable=False)
    unique_no = Column(BigInteger, nullable=False, index=True)
