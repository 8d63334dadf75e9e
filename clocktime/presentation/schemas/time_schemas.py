"""Time schemas for JSON serialization"""

from pydantic import BaseModel

from clocktime.domain.value_objects.time_mode import TimeMode


class TimeJSON(BaseModel):
    """Schema for the flat JSON form of a time value"""

    hours: int
    minutes: int
    seconds: int
    milliseconds: int
    mode: TimeMode

    class Config:
        json_schema_extra = {
            "example": {
                "hours": 12,
                "minutes": 30,
                "seconds": 45,
                "milliseconds": 123,
                "mode": "clock",
            }
        }
