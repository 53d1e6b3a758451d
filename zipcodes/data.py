import threading
from pathlib import Path

import pandas as pd
from pydantic import ValidationError

from zipcodes.config import DEFAULT_DATA_PATH, config
from zipcodes.errors import DataCorruption
from zipcodes.logger import get_logger
from zipcodes.models import Zipcode

logger = get_logger()

_lock = threading.Lock()
_zipcodes: tuple[Zipcode, ...] | None = None


def read_zipcodes(path: Path = DEFAULT_DATA_PATH) -> tuple[Zipcode, ...]:
    """Parse a JSON array of zip codes, compression picked from the suffix."""
    try:
        zip_code_df = pd.read_json(
            path,
            orient="records",
            dtype=False,
            convert_dates=False,
            compression="infer",
        )
    except (OSError, ValueError, EOFError) as e:
        raise DataCorruption(f"failed to read zipcode database {path}: {e}") from e

    if zip_code_df.empty:
        raise DataCorruption(f"zipcode database {path} contains no records")

    # Keys missing from some records come back as NaN
    zip_code_df = zip_code_df.astype(object).where(zip_code_df.notna(), None)

    try:
        zipcodes = tuple(
            Zipcode.model_validate(row)
            for row in zip_code_df.to_dict(orient="records")
        )
    except ValidationError as e:
        raise DataCorruption(
            f"failed to deserialize zipcode database {path}: {e}"
        ) from e

    logger.info("Loaded %d zip codes from %s", len(zipcodes), path)
    return zipcodes


def load() -> tuple[Zipcode, ...]:
    global _zipcodes

    if _zipcodes is None:
        with _lock:
            if _zipcodes is None:
                _zipcodes = read_zipcodes(config.data_path)
    return _zipcodes
