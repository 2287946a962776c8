"""
Prompts for branch content generation.

The master prompt asks the model for one Facebook post and one tweet per
political branch, returned as a single minified JSON object.
"""

from app.constants.branches import POLITICAL_BRANCHES, REQUIRED_PAIR_COUNT
from app.models.domain import Stance

STANCE_INSTRUCTIONS = {
    Stance.PRO: (
        "Create professional, supportive content about the current government "
        "and Datuk Seri Anwar Ibrahim, maintaining a formal and respectful tone in Malay."
    ),
    Stance.ANTI: (
        "Create aggressive but factual critical content in formal Malay against the "
        "Perikatan Nasional opposition. Focus only on documented ethical or legal issues "
        "from reliable sources. Do not use inflammatory language. Be assertive and direct."
    ),
}

EXAMPLE_PAIR = (
    '{"branch":"CABANG – KEPONG",'
    '"facebookPost":"<Generated Facebook post in formal Malay>",'
    '"tweet":"<Generated Tweet in formal Malay>"}'
)


def get_stance_instruction(stance: Stance) -> str:
    """Return the tone guideline for a stance."""
    return STANCE_INSTRUCTIONS[Stance(stance)]


def build_master_prompt(url: str, stance: Stance) -> str:
    """Build the generation prompt for an article URL and stance."""
    branches = ", ".join(POLITICAL_BRANCHES)
    count = REQUIRED_PAIR_COUNT

    return f"""Based on the news article found at this URL: {url}

Your task is to generate {count} unique social media content pairs (one Facebook post, one Tweet) for {count} different political branches.

Stance guideline: {get_stance_instruction(stance)}

For each of the following {count} branches, generate a unique content pair tailored to a general audience in that area: {branches}.

The output MUST be a single, minified JSON object. Do not include any text before or after the JSON object. The JSON object must have a single key "contentPairs" which is an array of {count} objects. Each object in the array must have three keys: "branch", "facebookPost", and "tweet".

Example of a single element in the array:
{EXAMPLE_PAIR}"""
