# backend/agrismart/schemas/farm.py

from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field

from agrismart.models.farm import SoilTypeEnum


# ============================================================
# FARM SCHEMAS
# ============================================================

class FarmBase(BaseModel):
    farm_name: str = Field(min_length=1)
    location: str = Field(min_length=1)
    area_size: Optional[float] = Field(default=None, gt=0)
    soil_type: Optional[SoilTypeEnum] = None
    crop_type: Optional[str] = None


class FarmCreate(FarmBase):
    pass


class FarmUpdate(BaseModel):
    farm_name: Optional[str] = Field(default=None, min_length=1)
    location: Optional[str] = Field(default=None, min_length=1)
    area_size: Optional[float] = Field(default=None, gt=0)
    soil_type: Optional[SoilTypeEnum] = None
    crop_type: Optional[str] = None


class Farm(FarmBase):
    id: str
    user_id: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


# ------------------------------------------------------------
# Snapshot handed to the recommendation synthesizer. Every field
# is optional: the function endpoint accepts whatever row the
# client holds.
# ------------------------------------------------------------

class FarmSnapshot(BaseModel):
    farm_name: Optional[str] = None
    location: Optional[str] = None
    soil_type: Optional[str] = None
    crop_type: Optional[str] = None
    area_size: Optional[float] = None

    class Config:
        from_attributes = True
