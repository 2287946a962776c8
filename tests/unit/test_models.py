"""
Tests for domain and request models.
"""

import json
from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from app.models.domain import ContentPair, GenerationJob, Stance
from app.models.requests import GenerateContentRequest
from tests.fixtures.mock_data import mock_content_pairs, mock_generation_job


class TestStance:
    """Tests for Stance parsing."""

    @pytest.mark.parametrize("value", ["PRO", "pro", "Pro"])
    def test_parse_is_case_insensitive(self, value):
        assert Stance.parse(value) is Stance.PRO

    @pytest.mark.parametrize("value", ["NEUTRAL", " pro ", "ANTI\n"])
    def test_parse_unknown_raises(self, value):
        with pytest.raises(ValueError):
            Stance.parse(value)


class TestGenerationJob:
    """Tests for GenerationJob."""

    def test_requires_thirteen_pairs(self):
        with pytest.raises(ValidationError):
            GenerationJob(
                id="gen_1_abcdefg",
                source_url="https://example.com",
                stance=Stance.PRO,
                content_pairs=mock_content_pairs()[:12],
            )

    def test_serialises_camel_case(self):
        data = json.loads(mock_generation_job().to_json())
        assert set(data) == {"id", "createdAt", "sourceUrl", "stance", "contentPairs"}
        assert data["stance"] == "PRO"
        assert set(data["contentPairs"][0]) == {"branch", "facebookPost", "tweet"}

    def test_json_round_trip(self):
        job = mock_generation_job(stance=Stance.ANTI)
        assert GenerationJob.from_json(job.to_json()) == job

    def test_created_at_ms(self):
        job = mock_generation_job(
            created_at=datetime(2024, 6, 10, 6, 13, 20, 250000, tzinfo=timezone.utc)
        )
        assert job.created_at_ms == 1718000000250

    def test_default_created_at_is_utc(self):
        job = GenerationJob(
            id="gen_1_abcdefg",
            source_url="https://example.com",
            stance=Stance.PRO,
            content_pairs=mock_content_pairs(),
        )
        assert job.created_at.tzinfo is not None

    def test_is_immutable(self):
        job = mock_generation_job()
        with pytest.raises(ValidationError):
            job.stance = Stance.ANTI

    def test_content_pair_accepts_snake_case(self):
        pair = ContentPair(branch="CABANG – BATU", facebook_post="post", tweet="tweet")
        assert pair.model_dump(by_alias=True)["facebookPost"] == "post"


class TestGenerateContentRequest:
    """Tests for request validation."""

    def test_valid_request(self):
        request = GenerateContentRequest(url=" https://example.com/a ", stance="anti")
        assert request.url == "https://example.com/a"
        assert request.parsed_stance is Stance.ANTI

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"url": "https://example.com/a"},
            {"stance": "PRO"},
            {"url": "", "stance": "PRO"},
            {"url": "   ", "stance": "PRO"},
            {"url": "https://example.com/a", "stance": ""},
            {"url": "https://example.com/a", "stance": "MAYBE"},
            {"url": "https://example.com/a", "stance": " pro "},
        ],
    )
    def test_invalid_requests_rejected(self, payload):
        with pytest.raises(ValidationError):
            GenerateContentRequest(**payload)
