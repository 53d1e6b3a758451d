from decimal import Decimal
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, StringConstraints, field_validator

ZIP_CODE_LENGTH = 5

ZipCodeType = Literal["STANDARD", "PO BOX", "UNIQUE", "MILITARY"]


class Zipcode(BaseModel):
    """One entry of the zip code database, coordinates kept as source strings."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    zip_code: Annotated[str, StringConstraints(pattern=r"^[0-9]{5}$")]
    zip_code_type: ZipCodeType
    city: str
    acceptable_cities: tuple[str, ...] = ()
    unacceptable_cities: tuple[str, ...] = ()
    state: Annotated[str, StringConstraints(pattern=r"^[A-Z]{2}$")]
    county: str | None = None
    # APO/FPO codes carry the host country, or none
    country: str = "US"
    lat: str
    long: str
    timezone: str
    area_codes: tuple[str, ...] = ()
    active: bool
    world_region: str = "NA"

    @field_validator(
        "acceptable_cities", "unacceptable_cities", "area_codes", mode="before"
    )
    @classmethod
    def _missing_list_is_empty(cls, v: Any) -> Any:
        return () if v is None else v

    @property
    def latitude(self) -> Decimal:
        return Decimal(self.lat)

    @property
    def longitude(self) -> Decimal:
        return Decimal(self.long)

    def to_dict(self) -> dict[str, Any]:
        data = self.model_dump()
        for key in ("acceptable_cities", "unacceptable_cities", "area_codes"):
            data[key] = list(data[key])
        return data
