from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship
from shop_api.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True)

    # One-to-one; deleting a user that still owns a store is left to the FK to reject
    store = relationship("Store", back_populates="user", uselist=False, passive_deletes="all")

    def __repr__(self):
        return f"<User(id={self.id}, email='{self.email}')>"
