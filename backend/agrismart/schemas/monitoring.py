# backend/agrismart/schemas/monitoring.py

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field


class MonitoringReadingBase(BaseModel):
    temperature: Optional[float] = None
    humidity: Optional[float] = Field(default=None, ge=0, le=100)
    soil_moisture: Optional[float] = None
    soil_ph: Optional[float] = None
    nitrogen: Optional[int] = None
    phosphorus: Optional[int] = None
    potassium: Optional[int] = None
    weather_condition: Optional[str] = None


class MonitoringReadingCreate(MonitoringReadingBase):
    recorded_at: Optional[datetime] = None


class MonitoringReading(MonitoringReadingBase):
    id: str
    farm_id: str
    recorded_at: datetime

    class Config:
        from_attributes = True


class MonitoringSnapshot(BaseModel):
    """Latest reading as embedded in the recommendation prompt."""
    temperature: Optional[float] = None
    humidity: Optional[float] = None
    soil_moisture: Optional[float] = None
    soil_ph: Optional[float] = None
    nitrogen: Optional[int] = None
    phosphorus: Optional[int] = None
    potassium: Optional[int] = None

    class Config:
        from_attributes = True
