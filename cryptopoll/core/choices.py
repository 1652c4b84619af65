"""
Fixed answer sets offered by the survey form.
"""
from enum import Enum
from typing import Dict, FrozenSet, Type


class Cryptocurrency(Enum):
    """Favourite cryptocurrency (JSON key ``role``)."""
    BITCOIN = "bitcoin"
    ETHEREUM = "ethereum"
    LITECOIN = "litecoin"
    BINANCE_COIN = "binance-coin"
    SOLANA = "solana"
    OTHER = "other"


class Frequency(Enum):
    """Investment frequency."""
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    RARELY = "rarely"


class Characteristic(Enum):
    """Valued cryptocurrency characteristics (JSON key ``prefer``)."""
    SECURITY = "security"
    SCALABILITY = "scalability"
    DECENTRALIZATION = "decentralization"
    TRANSACTION_SPEED = "transaction-speed"
    COMMUNITY = "community"


def values_of(choices: Type[Enum]) -> FrozenSet[str]:
    return frozenset(member.value for member in choices)


CRYPTOCURRENCIES = values_of(Cryptocurrency)
FREQUENCIES = values_of(Frequency)
CHARACTERISTICS = values_of(Characteristic)

LABELS: Dict[str, str] = {
    "bitcoin": "Bitcoin",
    "ethereum": "Ethereum",
    "litecoin": "Litecoin",
    "binance-coin": "Binance Coin",
    "solana": "Solana",
    "other": "Other",
    "daily": "Daily",
    "weekly": "Weekly",
    "monthly": "Monthly",
    "rarely": "Rarely",
    "security": "Security",
    "scalability": "Scalability",
    "decentralization": "Decentralization",
    "transaction-speed": "Transaction speed",
    "community": "Community",
}
