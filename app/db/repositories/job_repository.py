"""
Job Repository - Data access layer for generation jobs in Redis.

Key layout:
- ``<job id>``: JSON-encoded GenerationJob
- ``latest_content_id``: ID of the most recent job
- ``jobs_by_date``: sorted set of job IDs scored by creation time (epoch ms)
"""

from typing import List, Optional

from pydantic import ValidationError
from redis.exceptions import RedisError

from app.config import get_settings
from app.models.domain import GenerationJob
from app.services.redis_service import RedisService, get_redis_service
from app.utils.exceptions import StoreError
from app.utils.logging import get_logger

logger = get_logger(__name__)


class JobRepository:
    """
    Repository for generation jobs.

    Provides methods for:
    - Storing a job together with the latest pointer and history index
    - Listing jobs newest first
    - Retrieving the latest job or a job by ID
    """

    def __init__(self, redis_service: Optional[RedisService] = None):
        settings = get_settings()
        self._redis = redis_service or get_redis_service()
        self.latest_key = settings.LATEST_CONTENT_KEY
        self.index_key = settings.JOBS_INDEX_KEY

    @property
    def client(self):
        """Get the shared Redis client."""
        return self._redis.get_client()

    async def create(self, job: GenerationJob) -> str:
        """
        Store a job, point ``latest`` at it and add it to the history index.

        The three writes run in one MULTI/EXEC transaction.

        Args:
            job: GenerationJob to store

        Returns:
            ID of the stored job
        """
        try:
            async with self.client.pipeline(transaction=True) as pipe:
                pipe.set(job.id, job.to_json())
                pipe.set(self.latest_key, job.id)
                pipe.zadd(self.index_key, {job.id: job.created_at_ms})
                await pipe.execute()
        except RedisError as e:
            logger.error("job_store_failed", job_id=job.id, error=str(e))
            raise StoreError("write", str(e), details={"job_id": job.id}) from e

        logger.info(
            "job_created",
            job_id=job.id,
            stance=job.stance.value,
            source_url=job.source_url,
        )
        return job.id

    async def get_by_id(self, job_id: str) -> Optional[GenerationJob]:
        """
        Get a job by its ID.

        Args:
            job_id: Unique job identifier

        Returns:
            GenerationJob if found, None otherwise
        """
        try:
            raw = await self.client.get(job_id)
        except RedisError as e:
            raise StoreError("read", str(e), details={"job_id": job_id}) from e

        if not raw:
            return None
        return self._decode(job_id, raw)

    async def get_latest(self) -> Optional[GenerationJob]:
        """
        Get the most recently created job.

        Returns:
            Latest GenerationJob, or None if nothing has been generated yet
        """
        try:
            latest_id = await self.client.get(self.latest_key)
        except RedisError as e:
            raise StoreError("read", str(e), details={"key": self.latest_key}) from e

        if not latest_id:
            return None
        return await self.get_by_id(latest_id)

    async def list_recent(self, limit: Optional[int] = None) -> List[GenerationJob]:
        """
        List jobs newest first.

        Args:
            limit: Maximum number of jobs (None for all)

        Returns:
            Jobs ordered by creation time, descending
        """
        if limit is not None and limit <= 0:
            return []
        end = -1 if limit is None else limit - 1

        try:
            job_ids = await self.client.zrevrange(self.index_key, 0, end)
            if not job_ids:
                return []
            raw_jobs = await self.client.mget(job_ids)
        except RedisError as e:
            raise StoreError("read", str(e), details={"key": self.index_key}) from e

        jobs = []
        for job_id, raw in zip(job_ids, raw_jobs):
            if raw is None:
                logger.warning("job_missing_from_store", job_id=job_id)
                continue
            jobs.append(self._decode(job_id, raw))

        return jobs

    def _decode(self, job_id: str, raw: str) -> GenerationJob:
        """Deserialise a stored job."""
        try:
            return GenerationJob.from_json(raw)
        except ValidationError as e:
            logger.error("job_decode_failed", job_id=job_id, error=str(e))
            raise StoreError("decode", str(e), details={"job_id": job_id}) from e


# Singleton instance
_job_repository: Optional[JobRepository] = None


def get_job_repository() -> JobRepository:
    """Get singleton JobRepository instance."""
    global _job_repository
    if _job_repository is None:
        _job_repository = JobRepository()
    return _job_repository
