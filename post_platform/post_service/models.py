from sqlalchemy import Column, Integer, String, Text

from .db import Base


class Post(Base):
    __tablename__ = "posts"
    id = Column(Integer, primary_key=True, index=True)
    title = Column(String, nullable=False)
    text = Column(Text, nullable=False)
    new_col = Column(Integer, nullable=False, server_default="100")

    def __repr__(self):
        return f"<Post(id={self.id}, title={self.title!r}, new_col={self.new_col})>"


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, unique=True, index=True, nullable=False)
    # stored under the column name "hash"
    password_hash = Column("hash", String, nullable=False)

    def __repr__(self):
        return f"<User(id={self.id}, email={self.email!r})>"
