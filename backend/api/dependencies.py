"""Shared dependencies for API routes."""

from services.matching import service


def get_matching_service() -> service.MatchingService:
    return service.get_matching_service()
