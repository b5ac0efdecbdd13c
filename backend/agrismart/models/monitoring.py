# backend/agrismart/models/monitoring.py

from sqlalchemy import Column, String, Integer, Float, ForeignKey, DateTime, Uuid
from sqlalchemy.orm import relationship
from datetime import datetime

from agrismart.core.database import Base
from agrismart.models.farm import gen_uuid


# ============================================================
# MONITORING READING (append-only; history ordered by recorded_at)
# ============================================================
class MonitoringReading(Base):
    __tablename__ = "monitoring_data"

    id = Column(Uuid(as_uuid=False), primary_key=True, default=gen_uuid)
    farm_id = Column(Uuid(as_uuid=False), ForeignKey("farms.id"), nullable=False, index=True)
    recorded_at = Column(DateTime, default=datetime.utcnow, index=True)

    temperature = Column(Float, nullable=True)          # °C
    humidity = Column(Float, nullable=True)             # %
    soil_moisture = Column(Float, nullable=True)        # %
    soil_ph = Column(Float, nullable=True)
    nitrogen = Column(Integer, nullable=True)
    phosphorus = Column(Integer, nullable=True)
    potassium = Column(Integer, nullable=True)
    weather_condition = Column(String, nullable=True)

    farm = relationship("Farm", back_populates="monitoring_data")
