"""
Survey answer models. Every row belongs to the user inserted in the same
transaction and is never updated afterwards.
"""
from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from cryptopoll.db.base import Base


class CryptocurrencyPreference(Base):
    """Favourite cryptocurrency, exactly one per user."""

    __tablename__ = "cryptocurrency_preferences"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)
    cryptocurrency = Column(String(32), nullable=False)

    user = relationship("User", back_populates="cryptocurrency_preference")


class InvestmentFrequency(Base):
    """How often the respondent invests, at most one per user."""

    __tablename__ = "investment_frequency"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)
    frequency = Column(String(16), nullable=False)

    user = relationship("User", back_populates="investment_frequency")


class ValuedCharacteristic(Base):
    """One row per characteristic the respondent ticked."""

    __tablename__ = "valued_characteristics"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    characteristic = Column(String(32), nullable=False)

    user = relationship("User", back_populates="valued_characteristics")


class Comment(Base):
    """Free-text comment, HTML-escaped and capped at 1000 characters."""

    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), unique=True, nullable=False)
    comment = Column(String(1000), nullable=False)

    user = relationship("User", back_populates="comment")
