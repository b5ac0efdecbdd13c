# backend/agrismart/main.py

# import logger first so handlers attach before anything logs
import agrismart.core.logger
from agrismart.core.logger import logger

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import agrismart.models  # noqa: F401  (register tables on Base.metadata)
from agrismart.core.config import settings
from agrismart.core.database import create_tables
from agrismart.core.errors import register_error_handlers
from agrismart.core.request_middleware import RequestLoggingMiddleware
from agrismart.core.error_middleware import ExceptionLoggingMiddleware

from agrismart import api
from agrismart.api import (
    functions,
    farms,
    monitoring,
    recommendations,
    dashboard,
    help_tickets,
    appointments,
)

# ---------------------------------------------------
# Create FastAPI instance FIRST
# ---------------------------------------------------
app = FastAPI(title="AgriSmart API", version="1.0")


# ---------------------------------------------------
# CORS; preflight requests are answered here
# ---------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ---------------------------------------------------
# Logging middlewares + domain error responses
# ---------------------------------------------------
app.add_middleware(RequestLoggingMiddleware)
app.add_middleware(ExceptionLoggingMiddleware)
register_error_handlers(app)


# ---------------------------------------------------
# Include Routers
# ---------------------------------------------------
app.include_router(api.router)
app.include_router(functions.router)
app.include_router(farms.router)
app.include_router(monitoring.router)
app.include_router(recommendations.router)
app.include_router(dashboard.router)
app.include_router(help_tickets.router)
app.include_router(appointments.router)


@app.on_event("startup")
async def startup_event():
    await create_tables()
    logger.info("Backend started with structured JSON logging")
