"""
Tests for the content generation prompt.
"""

from app.constants.branches import POLITICAL_BRANCHES
from app.models.domain import Stance
from app.prompts.content_prompts import (
    STANCE_INSTRUCTIONS,
    build_master_prompt,
    get_stance_instruction,
)


class TestStanceInstruction:
    """Tests for stance guideline selection."""

    def test_pro_instruction_is_supportive(self):
        instruction = get_stance_instruction(Stance.PRO)
        assert "Datuk Seri Anwar Ibrahim" in instruction
        assert "supportive" in instruction

    def test_anti_instruction_targets_opposition(self):
        instruction = get_stance_instruction(Stance.ANTI)
        assert "Perikatan Nasional" in instruction
        assert "Do not use inflammatory language" in instruction

    def test_accepts_plain_string_stance(self):
        assert get_stance_instruction("ANTI") == STANCE_INSTRUCTIONS[Stance.ANTI]


class TestMasterPrompt:
    """Tests for build_master_prompt."""

    def test_includes_url(self):
        prompt = build_master_prompt("https://example.com/a", Stance.PRO)
        assert "Based on the news article found at this URL: https://example.com/a" in prompt

    def test_includes_stance_guideline(self):
        prompt = build_master_prompt("https://example.com/a", Stance.ANTI)
        assert f"Stance guideline: {STANCE_INSTRUCTIONS[Stance.ANTI]}" in prompt
        assert STANCE_INSTRUCTIONS[Stance.PRO] not in prompt

    def test_lists_every_branch_in_order(self):
        prompt = build_master_prompt("https://example.com/a", Stance.PRO)
        assert ", ".join(POLITICAL_BRANCHES) in prompt

    def test_asks_for_thirteen_pairs_as_json(self):
        prompt = build_master_prompt("https://example.com/a", Stance.PRO)
        assert "generate 13 unique social media content pairs" in prompt
        assert 'single key "contentPairs"' in prompt
        assert '"branch", "facebookPost", and "tweet"' in prompt

    def test_includes_example_element(self):
        prompt = build_master_prompt("https://example.com/a", Stance.PRO)
        assert '{"branch":"CABANG – KEPONG","facebookPost":' in prompt
