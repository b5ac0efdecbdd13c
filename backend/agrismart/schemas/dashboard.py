# backend/agrismart/schemas/dashboard.py

from typing import Optional
from pydantic import BaseModel

from agrismart.schemas.monitoring import MonitoringReading


class DashboardSummary(BaseModel):
    total_farms: int
    total_recommendations: int
    latest_farm_id: Optional[str] = None
    latest_reading: Optional[MonitoringReading] = None
