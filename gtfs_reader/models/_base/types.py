from __future__ import annotations

from typing import Annotated, Literal

from pydantic import Field

TransitFileTypes = Literal["txt", "csv"]

Id = Annotated[str, Field(description="Identifier. Any sequence of UTF-8 characters.")]

Text = Annotated[str, Field(description="A string of UTF-8 characters.")]

CurrencyCode = Annotated[str, Field(description="An ISO 4217 alphabetical currency code.")]

LanguageCode = Annotated[str, Field(description="An IETF BCP 47 language code.")]

Latitude = Annotated[float, Field(ge=-90, le=90, description="WGS84 latitude.")]

Longitude = Annotated[float, Field(ge=-180, le=180, description="WGS84 longitude.")]

NonNegativeInt = Annotated[int, Field(ge=0)]

NonNegativeFloat = Annotated[float, Field(ge=0)]
