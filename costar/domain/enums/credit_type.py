from __future__ import annotations
from enum import StrEnum

class CreditType(StrEnum):
    cast = "cast"
    crew = "crew"
