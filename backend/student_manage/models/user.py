from sqlalchemy import Column, Integer, String
from student_manage.database.base import Base


class User(Base):
    __tablename__ = "loginDetails"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=True)
    email = Column(String, unique=True, nullable=False)
    password = Column(String, nullable=False)
