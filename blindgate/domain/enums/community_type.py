"""Community categories. Company members are auto-joined to COMPANY communities."""

from enum import Enum


class CommunityType(str, Enum):
    COMPANY = "COMPANY"
    TOPIC = "TOPIC"
    INTEREST = "INTEREST"
    PUBLIC_SERVANT = "PUBLIC_SERVANT"
