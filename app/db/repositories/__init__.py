"""
Repository pattern implementation for Redis-backed data.
"""

from app.db.repositories.job_repository import JobRepository, get_job_repository

__all__ = [
    "JobRepository",
    "get_job_repository",
]
