"""
Response Parser - turns free-form model output into content pairs.

The model is asked for bare JSON but often wraps it in markdown fences or
adds commentary. The object is located with a greedy brace match (first
``{`` to last ``}``) rather than a real parser, then validated.
"""

import json
import re
from typing import Any, List

from pydantic import ValidationError

from app.constants.branches import POLITICAL_BRANCHES, REQUIRED_PAIR_COUNT
from app.models.domain import ContentPair
from app.utils.exceptions import ContentValidationError, ResponseParseError
from app.utils.logging import get_logger

logger = get_logger(__name__)

JSON_OBJECT_PATTERN = re.compile(r"\{[\s\S]*\}")

# Characters of raw model output kept in logs and error details
RAW_PREVIEW_CHARS = 500


def extract_json_object(text: str) -> str:
    """
    Return the outermost brace-delimited span in ``text``.

    Raises:
        ResponseParseError: If the text contains no ``{...}`` span
    """
    match = JSON_OBJECT_PATTERN.search(text or "")
    if not match:
        logger.error("ai_response_no_json", response_preview=(text or "")[:RAW_PREVIEW_CHARS])
        raise ResponseParseError(
            "Failed to parse AI response. No valid JSON object found.",
            raw_response=text,
        )
    return match.group(0)


def parse_content_pairs(text: str) -> List[ContentPair]:
    """
    Extract and validate the content pairs from model output.

    Args:
        text: Raw model response text

    Returns:
        Exactly one ContentPair per branch, in the order the model gave them

    Raises:
        ResponseParseError: No JSON object, or it does not decode
        ContentValidationError: JSON decoded but is not the required format
    """
    candidate = extract_json_object(text)

    try:
        data: Any = json.loads(candidate)
    except json.JSONDecodeError as e:
        logger.error(
            "ai_response_json_decode_error",
            error=str(e),
            response_preview=text[:RAW_PREVIEW_CHARS],
        )
        raise ResponseParseError(
            f"Invalid JSON in AI response: {e}",
            raw_response=text,
        ) from e

    raw_pairs = data.get("contentPairs") if isinstance(data, dict) else None
    if not isinstance(raw_pairs, list) or len(raw_pairs) != REQUIRED_PAIR_COUNT:
        raise ContentValidationError(
            f"AI response did not match the required format ({REQUIRED_PAIR_COUNT} content pairs).",
            field="contentPairs",
            details={
                "received": len(raw_pairs) if isinstance(raw_pairs, list) else None,
            },
        )

    try:
        pairs = [ContentPair.model_validate(item) for item in raw_pairs]
    except ValidationError as e:
        raise ContentValidationError(
            "AI response contained an invalid content pair.",
            field="contentPairs",
            details={"errors": e.errors(include_url=False, include_context=False, include_input=False)},
        ) from e

    unknown = [p.branch for p in pairs if p.branch not in POLITICAL_BRANCHES]
    if unknown:
        logger.warning("ai_response_unknown_branches", branches=unknown)

    return pairs
