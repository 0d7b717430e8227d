# src/bookstore/models/review.py
from sqlalchemy import Column, Integer, String, Text, ForeignKey
from sqlalchemy.orm import relationship
from bookstore.db.session import Base

class Review(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=True)
    source = Column(String(255), nullable=True)
    description = Column(Text, nullable=True)
    # Una reseña no existe sin su libro; se fija al crearla y no se reasigna.
    book_id = Column(Integer, ForeignKey("books.id"), nullable=False, index=True)

    book = relationship("Book", back_populates="reviews")

    def __repr__(self):
        return f"<Review(id={self.id}, book_id={self.book_id}, name='{self.name}', source='{self.source}')>"
