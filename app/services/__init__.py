"""
Services for the Branch Content Engine.

Services:
1. redis_service - Shared Redis connection
2. response_parser - JSON extraction and validation of model output
3. content_generator_service - AI-powered branch content generation

Import from the submodules directly; the job repository depends on
redis_service, and the generator depends on the job repository.
"""

__all__ = []
