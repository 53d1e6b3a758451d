"""
In-memory lookup of U.S. zip codes from the bundled database.
"""

from zipcodes.data import load
from zipcodes.errors import (
    DataCorruption,
    InvalidCharacters,
    InvalidFormat,
    InvalidType,
    ValidationError,
    ZipcodeError,
)
from zipcodes.models import Zipcode
from zipcodes.query import (
    Predicate,
    filter_by,
    is_real,
    list_all,
    matching,
    similar_to,
    to_dataframe,
    where,
)

__version__ = "1.0.0"

__all__ = [
    "DataCorruption",
    "InvalidCharacters",
    "InvalidFormat",
    "InvalidType",
    "Predicate",
    "ValidationError",
    "Zipcode",
    "ZipcodeError",
    "filter_by",
    "is_real",
    "list_all",
    "load",
    "matching",
    "similar_to",
    "to_dataframe",
    "where",
]
