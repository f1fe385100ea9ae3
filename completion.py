# completion.py
from functools import lru_cache
from typing import Any, Dict, List, Optional, Sequence

from google import genai
from google.genai import types

from models import ChatInstruction, CompletionResult
from settings import Settings

FALLBACK_REPLY = "I'm sorry, I couldn't process that request."

# genai names the assistant side "model"
_PROVIDER_ROLES = {"user": "user", "assistant": "model"}


@lru_cache(maxsize=4)
def _client_for(api_key: str) -> genai.Client:
    return genai.Client(api_key=api_key)


def make_client(settings: Settings) -> genai.Client:
    """One shared client per API key."""
    return _client_for(settings.API_KEY)


def to_contents(instructions: Sequence[ChatInstruction]) -> tuple:
    """Split instructions into (system_instruction, contents) for generate_content."""
    system_parts: List[str] = []
    contents: List[Dict[str, Any]] = []
    for item in instructions:
        if item.role == "system":
            system_parts.append(item.content)
            continue
        contents.append({"role": _PROVIDER_ROLES[item.role], "parts": [{"text": item.content}]})
    system_instruction = "\n\n".join(system_parts) if system_parts else None
    return system_instruction, contents


def generate_reply(
    instructions: Sequence[ChatInstruction],
    settings: Settings,
    client: Optional[genai.Client] = None,
) -> CompletionResult:
    """Run one completion with the fixed model parameters.

    Transport and service errors propagate to the caller. A response with no
    text yields ``FALLBACK_REPLY``.
    """
    client = client or make_client(settings)
    system_instruction, contents = to_contents(instructions)

    response = client.models.generate_content(
        model=settings.MODEL_NAME,
        config=types.GenerateContentConfig(
            system_instruction=system_instruction,
            max_output_tokens=settings.MAX_OUTPUT_TOKENS,
            temperature=settings.TEMPERATURE,
        ),
        contents=contents,
    )
    text = getattr(response, "text", None) or ""

    usage = getattr(response, "usage_metadata", None)
    tokens_used = getattr(usage, "total_token_count", None) if usage else None

    return CompletionResult(text=text or FALLBACK_REPLY, tokens_used=tokens_used)
