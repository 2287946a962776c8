"""
Branch Content Engine.

Generates branch-level social media content from news articles using
Google Gemini and keeps the generation history in Redis.
"""

__version__ = "1.0.0"
