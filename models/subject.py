"""Модель анкеты (личные данные респондента)"""
from sqlalchemy import Column, Integer, String, Date, DateTime
from sqlalchemy.orm import relationship
from datetime import datetime
from utils.validators import MAX_NAME_LENGTH, MAX_EMAIL_LENGTH, MAX_CONTACT_LENGTH
from .database import Base


class Subject(Base):
    __tablename__ = "personal_details"

    id = Column(Integer, primary_key=True, autoincrement=True)
    full_name = Column(String(MAX_NAME_LENGTH), nullable=False)
    email = Column(String(MAX_EMAIL_LENGTH), nullable=False)
    date_of_birth = Column(Date, nullable=False)
    contact_number = Column(String(MAX_CONTACT_LENGTH), nullable=False)
    submitted_at = Column(DateTime, nullable=False, default=datetime.now)

    # Еда и оценки утверждений
    attributes = relationship(
        "Attribute",
        back_populates="subject",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )

    def __repr__(self):
        return f"<Subject(id={self.id}, full_name={self.full_name})>"
