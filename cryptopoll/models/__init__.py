"""Models module - Import all models here so metadata sees every table."""
from cryptopoll.db.base import Base
from cryptopoll.models.user import User
from cryptopoll.models.survey import (
    CryptocurrencyPreference,
    InvestmentFrequency,
    ValuedCharacteristic,
    Comment,
)

__all__ = ["Base", "User", "CryptocurrencyPreference", "InvestmentFrequency", "ValuedCharacteristic", "Comment"]
