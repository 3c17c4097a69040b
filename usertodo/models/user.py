from sqlalchemy import Column, DateTime, Integer, String, Text
from sqlalchemy.sql import func

from usertodo.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    email = Column(String(150), unique=True, nullable=False)
    age = Column(Integer, nullable=True)
    phone = Column(String(15), nullable=True)
    address = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    # not refreshed by updates; only the creation time is ever stored
    updated_at = Column(DateTime, server_default=func.now())
