"""Dependency injection for FastAPI endpoints"""

from fastapi import Request

from fee_gateway.config import Settings, settings
from fee_gateway.domain.fines import LATE_FINE_SCHEDULE, FineSchedule
from fee_gateway.domain.words import NUMBERING_SYSTEMS, NumberingSystem


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_settings() -> Settings:
    """Provide application settings"""
    return settings


def get_fine_schedule() -> FineSchedule:
    """Provide the late-fine schedule applied to receipts"""
    return LATE_FINE_SCHEDULE


def get_numbering_system() -> NumberingSystem:
    """Provide the configured grouping table for amounts in words"""
    return NUMBERING_SYSTEMS[settings.numbering_system]
