# backend/agrismart/schemas/weather.py

from typing import List
from pydantic import BaseModel, Field


# ============================================================
# OPENWEATHERMAP PAYLOAD (only the fields we read)
# ============================================================

class OpenWeatherMain(BaseModel):
    temp: float
    humidity: float = Field(ge=0, le=100)


class OpenWeatherCondition(BaseModel):
    main: str
    description: str


class OpenWeatherPayload(BaseModel):
    main: OpenWeatherMain
    weather: List[OpenWeatherCondition] = Field(min_length=1)


# ============================================================
# OUR SIDE
# ============================================================

class WeatherObservation(BaseModel):
    temperature: float
    humidity: float = Field(ge=0, le=100)
    condition: str
    description: str


class WeatherRequest(BaseModel):
    location: str = Field(min_length=1)


class DerivedReading(BaseModel):
    temperature: float
    humidity: float
    weather_condition: str
    description: str
    soil_moisture: float = Field(ge=30, le=90)
    soil_ph: float = Field(ge=6.0, le=7.0)
    nitrogen: int = Field(ge=25, le=39)
    phosphorus: int = Field(ge=12, le=19)
    potassium: int = Field(ge=15, le=24)
