from collections.abc import Iterable
from typing import Any, Protocol

import pandas as pd

from zipcodes.data import load
from zipcodes.errors import InvalidCharacters, InvalidFormat, InvalidType
from zipcodes.logger import get_logger
from zipcodes.models import ZIP_CODE_LENGTH, Zipcode

ZIP4_LENGTH = 4

logger = get_logger()


class Predicate(Protocol):
    def __call__(self, zipcode: Zipcode, /) -> bool: ...


def _is_digits(value: str) -> bool:
    return value.isascii() and value.isdigit()


def _clean_zip_code(zip_code: object) -> str:
    if not isinstance(zip_code, str):
        raise InvalidType(zip_code)

    zip5, sep, zip4 = zip_code.partition("-")
    for part in (zip5, zip4):
        if part and not _is_digits(part):
            raise InvalidCharacters(zip_code)
    if len(zip5) != ZIP_CODE_LENGTH or (sep and len(zip4) != ZIP4_LENGTH):
        raise InvalidFormat(zip_code)
    return zip5


def _clean_partial_zip(partial_zip: object) -> str:
    if not isinstance(partial_zip, str):
        raise InvalidType(partial_zip)

    if partial_zip and not _is_digits(partial_zip):
        raise InvalidCharacters(partial_zip)
    if not partial_zip or len(partial_zip) > ZIP_CODE_LENGTH:
        raise InvalidFormat(partial_zip, expected="1 to 5 digits")
    return partial_zip


def _scope(zips: Iterable[Zipcode] | None) -> Iterable[Zipcode]:
    return load() if zips is None else zips


def matching(zip_code: str, zips: Iterable[Zipcode] | None = None) -> list[Zipcode]:
    """Every zip code in `zips` equal to `zip_code`, ignoring a ZIP+4 suffix."""
    zip5 = _clean_zip_code(zip_code)
    matching_zipcodes = [z for z in _scope(zips) if z.zip_code == zip5]
    logger.debug("matching %s matched %d zipcodes", zip5, len(matching_zipcodes))
    return matching_zipcodes


def is_real(zip_code: str) -> bool:
    return len(matching(zip_code)) > 0


def similar_to(
    partial_zip: str, zips: Iterable[Zipcode] | None = None
) -> list[Zipcode]:
    """Every zip code in `zips` starting with `partial_zip` (1 to 5 digits)."""
    prefix = _clean_partial_zip(partial_zip)
    similar_zipcodes = [z for z in _scope(zips) if z.zip_code.startswith(prefix)]
    logger.debug("similar_to %s matched %d zipcodes", prefix, len(similar_zipcodes))
    return similar_zipcodes


def where(**fields: Any) -> Predicate:
    """Predicate testing attribute equality, e.g. ``where(city="Windsor")``."""
    for name in fields:
        if name not in Zipcode.model_fields:
            raise AttributeError(f"Zipcode has no field {name!r}")
    # list fields are stored as tuples
    fields = {
        name: tuple(value) if isinstance(value, list) else value
        for name, value in fields.items()
    }

    def predicate(zipcode: Zipcode) -> bool:
        return all(getattr(zipcode, name) == value for name, value in fields.items())

    return predicate


def filter_by(
    predicates: Iterable[Predicate] = (),
    zips: Iterable[Zipcode] | None = None,
    **fields: Any,
) -> list[Zipcode]:
    """Every zip code in `zips` for which all predicates and `fields` equalities hold."""
    predicates = list(predicates)
    if fields:
        predicates.append(where(**fields))

    filtered = [z for z in _scope(zips) if all(p(z) for p in predicates)]
    logger.debug("filter_by matched %d zipcodes", len(filtered))
    return filtered


def list_all() -> list[Zipcode]:
    return list(load())


def to_dataframe(zips: Iterable[Zipcode] | None = None) -> pd.DataFrame:
    return pd.DataFrame.from_records(
        [z.to_dict() for z in _scope(zips)],
        columns=list(Zipcode.model_fields),
    )
