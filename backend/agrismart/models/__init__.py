from .farm import Farm, SoilTypeEnum
from .monitoring import MonitoringReading
from .recommendation import (
    Recommendation,
    RecommendationTypeEnum,
    RecommendationStatusEnum,
)
from .help_ticket import HelpTicket, TicketPriorityEnum, TicketStatusEnum
from .expert_appointment import ExpertAppointment, AppointmentStatusEnum
from ..core.database import Base
__all__ = [
    "Farm",
    "SoilTypeEnum",
    "MonitoringReading",
    "Recommendation",
    "RecommendationTypeEnum",
    "RecommendationStatusEnum",
    "HelpTicket",
    "TicketPriorityEnum",
    "TicketStatusEnum",
    "ExpertAppointment",
    "AppointmentStatusEnum",
    "Base"
]
