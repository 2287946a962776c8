"""
Prompt templates for the generative model.
"""

from app.prompts.content_prompts import (
    STANCE_INSTRUCTIONS,
    build_master_prompt,
    get_stance_instruction,
)

__all__ = ["STANCE_INSTRUCTIONS", "build_master_prompt", "get_stance_instruction"]
