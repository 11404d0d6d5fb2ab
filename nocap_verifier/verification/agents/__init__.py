"""
Verification agents, one per external fact-checking provider
"""

from .base_agent import HTTPVerificationAgent, ProviderClient, VerificationAgent, NOT_CONFIGURED_REASON
from .brightdata_agent import BrightDataAgent
from .claude_agent import ClaudeAgent
from .fetchai_agent import FetchAIAgent
from .gemini_agent import GeminiAgent

__all__ = [
    "VerificationAgent",
    "HTTPVerificationAgent",
    "ProviderClient",
    "NOT_CONFIGURED_REASON",
    "ClaudeAgent",
    "FetchAIAgent",
    "GeminiAgent",
    "BrightDataAgent",
]
