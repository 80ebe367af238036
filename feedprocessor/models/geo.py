"""Geographic position model and the coordinate reference system it uses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class CoordinateReferenceSystem(BaseModel):
    """Identifies a geographic coordinate reference system by EPSG code."""

    epsg_code: int = Field(..., description="EPSG registry code")
    name: str = Field(..., description="Human-readable CRS name")

    model_config = ConfigDict(frozen=True)


# Longitude/latitude in degrees on the WGS 84 datum.
WGS84 = CoordinateReferenceSystem(epsg_code=4326, name="WGS 84")


class GeoPosition(BaseModel):
    """A longitude/latitude pair referenced to WGS 84."""

    longitude: float = Field(..., description="Longitude in decimal degrees")
    latitude: float = Field(..., description="Latitude in decimal degrees")
    crs: CoordinateReferenceSystem = Field(
        default=WGS84, description="Coordinate reference system of the position"
    )

    model_config = ConfigDict(frozen=True)


__all__ = ["CoordinateReferenceSystem", "GeoPosition", "WGS84"]
