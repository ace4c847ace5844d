"""Модель атрибута анкеты (ключ/значение)"""
from sqlalchemy import Column, Integer, String, ForeignKey, Index
from sqlalchemy.orm import relationship
from .database import Base


class Attribute(Base):
    __tablename__ = "options"

    subject_id = Column(
        Integer,
        ForeignKey("personal_details.id", ondelete="CASCADE"),
        primary_key=True,
    )
    name = Column(String(100), primary_key=True)  # "FavoriteFood:Pizza", "MovieRating", ...
    rating = Column(Integer, nullable=True)  # только для утверждений

    subject = relationship("Subject", back_populates="attributes")

    __table_args__ = (
        Index("idx_option_name", "name"),
    )

    def __repr__(self):
        return f"<Attribute(subject_id={self.subject_id}, name={self.name}, rating={self.rating})>"
