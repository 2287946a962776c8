"""
Content Generator Service - AI-powered branch content generation.

Flow for a single request:
1. Build the master prompt for the article URL and stance
2. Ask Gemini for the content pairs
3. Extract and validate exactly one pair per branch
4. Store the job in Redis

Nothing is stored unless every step succeeds.
"""

import secrets
import string
import time
from datetime import datetime, timezone
from typing import Optional

from app.db.repositories.job_repository import JobRepository, get_job_repository
from app.models.domain import GenerationJob, Stance
from app.prompts.content_prompts import build_master_prompt
from app.services.response_parser import parse_content_pairs
from app.utils.gemini_client import GeminiClient
from app.utils.logging import get_logger

logger = get_logger(__name__)

JOB_ID_PREFIX = "gen"
JOB_ID_SUFFIX_LENGTH = 7
_BASE36 = string.digits + string.ascii_lowercase


def new_job_id(now_ms: Optional[int] = None) -> str:
    """
    Generate a job ID from the current time and a random suffix.

    Format: ``gen_<epoch ms>_<7 base36 chars>``.
    """
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    suffix = "".join(secrets.choice(_BASE36) for _ in range(JOB_ID_SUFFIX_LENGTH))
    return f"{JOB_ID_PREFIX}_{now_ms}_{suffix}"


class ContentGeneratorService:
    """
    Service for generating and storing branch content.

    Uses Google Gemini to write one Facebook post and one tweet for
    every political branch.
    """

    def __init__(
        self,
        client: Optional[GeminiClient] = None,
        repository: Optional[JobRepository] = None,
    ):
        self.client = client or GeminiClient()
        self.repository = repository or get_job_repository()
        self.logger = get_logger("content_generator")

    async def generate(self, url: str, stance: Stance) -> GenerationJob:
        """
        Generate content for an article and persist the job.

        Args:
            url: News article URL
            stance: Requested stance

        Returns:
            The stored GenerationJob
        """
        stance = Stance(stance)
        self.logger.info("content_generation_started", source_url=url, stance=stance.value)

        prompt = build_master_prompt(url, stance)
        response_text = await self.client.generate_content(prompt)
        content_pairs = parse_content_pairs(response_text)

        created_at = datetime.now(timezone.utc)
        job = GenerationJob(
            id=new_job_id(int(created_at.timestamp() * 1000)),
            created_at=created_at,
            source_url=url,
            stance=stance,
            content_pairs=content_pairs,
        )

        await self.repository.create(job)

        self.logger.info(
            "content_generation_completed",
            job_id=job.id,
            pairs=len(job.content_pairs),
        )
        return job


# Singleton instance
_content_generator: Optional[ContentGeneratorService] = None


def get_content_generator_service() -> ContentGeneratorService:
    """Get singleton ContentGeneratorService instance."""
    global _content_generator
    if _content_generator is None:
        _content_generator = ContentGeneratorService()
    return _content_generator
