# backend/agrismart/models/farm.py

from sqlalchemy import Column, String, Float, DateTime, Uuid, Enum as SAEnum
from sqlalchemy.orm import relationship
import enum
import uuid
from datetime import datetime

from agrismart.core.database import Base


def gen_uuid():
    return str(uuid.uuid4())


class SoilTypeEnum(str, enum.Enum):
    clay = "clay"
    sandy = "sandy"
    loamy = "loamy"
    silty = "silty"
    peaty = "peaty"
    chalky = "chalky"


# ============================================================
# FARM (owned by a user; parent of readings + recommendations)
# ============================================================
class Farm(Base):
    __tablename__ = "farms"

    id = Column(Uuid(as_uuid=False), primary_key=True, default=gen_uuid)
    user_id = Column(Uuid(as_uuid=False), nullable=False, index=True)
    farm_name = Column(String, nullable=False)
    location = Column(String, nullable=False)
    area_size = Column(Float, nullable=True)             # hectares
    soil_type = Column(SAEnum(SoilTypeEnum, name="soil_type", native_enum=False), nullable=True)
    crop_type = Column(String, nullable=True)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    monitoring_data = relationship("MonitoringReading", back_populates="farm")
    recommendations = relationship("Recommendation", back_populates="farm")
