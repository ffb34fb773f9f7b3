"""
Validated input payloads for store operations and seed files.

The store itself never validates: it trusts its inputs and treats unknown
ids as no-ops. Form data and seed JSON go through these models first, so
malformed dates, non-positive durations, unknown categories and inverted
date ranges are rejected at the boundary with a pydantic ValidationError.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from services.tripboard.models.itinerary import (
    Activity,
    ActivityCategory,
    CityStop,
    Region,
    TimeOfDay,
)


class ActivityCreate(BaseModel):
    """Fields a user supplies when authoring an activity."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    city_or_region: str = Field(alias="cityOrRegion", min_length=1)
    title: str = Field(min_length=1)
    description: str = ""
    category: ActivityCategory
    estimated_duration_hours: float = Field(alias="estimatedDurationHours", gt=0.0)
    recommended_time_of_day: Optional[TimeOfDay] = Field(default=None, alias="recommendedTimeOfDay")
    notes: Optional[str] = None
    link: Optional[str] = None

    @field_validator("city_or_region", "title")
    @classmethod
    def strip_whitespace(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("must not be blank")
        return v

    def to_activity(self, activity_id: str, is_interested: bool = False) -> Activity:
        return Activity(
            id=activity_id,
            city_or_region=self.city_or_region,
            title=self.title,
            description=self.description,
            category=self.category,
            estimated_duration_hours=self.estimated_duration_hours,
            recommended_time_of_day=self.recommended_time_of_day,
            notes=self.notes,
            link=self.link,
            is_interested=is_interested,
        )


class SeedActivity(ActivityCreate):
    """Activity record as it appears in a seed file (carries its own id)."""
    id: str = Field(min_length=1)
    is_interested: bool = Field(default=False, alias="isInterested")

    def to_activity(self, activity_id: Optional[str] = None, is_interested: Optional[bool] = None) -> Activity:
        return super().to_activity(
            activity_id or self.id,
            self.is_interested if is_interested is None else is_interested,
        )


class CityStopCreate(BaseModel):
    """Fields a user supplies when adding a stop to the route."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(min_length=1)
    start_date: date = Field(alias="startDate")
    end_date: date = Field(alias="endDate")
    region: Optional[Region] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @model_validator(mode="after")
    def range_not_inverted(self) -> "CityStopCreate":
        if self.end_date < self.start_date:
            raise ValueError(
                f"end_date {self.end_date.isoformat()} is before start_date {self.start_date.isoformat()}"
            )
        return self

    def to_city_stop(self, stop_id: str) -> CityStop:
        return CityStop(
            id=stop_id,
            name=self.name,
            start_date=self.start_date,
            end_date=self.end_date,
            region=self.region,
        )


class SeedCityStop(CityStopCreate):
    """City stop record as it appears in a seed file."""
    id: str = Field(min_length=1)

    def to_city_stop(self, stop_id: Optional[str] = None) -> CityStop:
        return super().to_city_stop(stop_id or self.id)


class CityStopUpdate(BaseModel):
    """Partial update for an existing stop. Unset fields are left alone."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: Optional[str] = Field(default=None, min_length=1)
    start_date: Optional[date] = Field(default=None, alias="startDate")
    end_date: Optional[date] = Field(default=None, alias="endDate")
    region: Optional[Region] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @model_validator(mode="after")
    def range_not_inverted(self) -> "CityStopUpdate":
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError(
                f"end_date {self.end_date.isoformat()} is before start_date {self.start_date.isoformat()}"
            )
        return self

    def changes(self) -> dict[str, Any]:
        """Only the fields the caller actually set. Region may be cleared; the rest may not."""
        changes = self.model_dump(exclude_unset=True, by_alias=False)
        return {k: v for k, v in changes.items() if v is not None or k == "region"}
