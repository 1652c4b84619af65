"""
Respondent model: one row per accepted survey submission.
"""
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from cryptopoll.db.base import Base


class User(Base):
    """Survey respondent."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(254), nullable=False, index=True)
    age = Column(Integer, nullable=True)  # 10-99 when given

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    cryptocurrency_preference = relationship(
        "CryptocurrencyPreference", back_populates="user", uselist=False
    )
    investment_frequency = relationship(
        "InvestmentFrequency", back_populates="user", uselist=False
    )
    valued_characteristics = relationship("ValuedCharacteristic", back_populates="user")
    comment = relationship("Comment", back_populates="user", uselist=False)
