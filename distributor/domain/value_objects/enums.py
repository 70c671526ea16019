"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class GeoStatus(str, Enum):
    PENDING = "pending"
    RESOLVED = "resolved"
    FAILED = "failed"
    ABROAD = "abroad"
    NO_CITY = "no_city"


class AssignmentTier(str, Enum):
    VIP = "vip"
    FOREIGN = "foreign"
    PROXIMITY = "proximity"
