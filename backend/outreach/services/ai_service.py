"""Thin wrapper around the generative-AI provider.

Callers hand over a prompt and get back text (plus any cited web sources) or
parsed JSON. Model behavior is not interpreted here.
"""
import json
import logging
import re
from dataclasses import dataclass, field

from openai import AsyncOpenAI, OpenAIError

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?")


class AIServiceError(Exception):
    """Raised when the AI provider call itself fails."""


@dataclass
class AICompletion:
    text: str
    sources: list[str] = field(default_factory=list)


def clean_and_parse_json(text: str) -> dict | None:
    """Parse a JSON object out of model output that may be fenced or padded."""
    clean = _FENCE_RE.sub("", text or "")
    first, last = clean.find("{"), clean.rfind("}")
    if first != -1 and last != -1:
        clean = clean[first:last + 1]
    try:
        parsed = json.loads(clean)
    except json.JSONDecodeError as exc:
        logger.error("Could not parse AI response as JSON: %s", exc)
        return None
    return parsed if isinstance(parsed, dict) else None


def extract_sources(message) -> list[str]:
    """Unique cited URLs from a chat message's url_citation annotations, in order."""
    sources: list[str] = []
    for annotation in getattr(message, "annotations", None) or []:
        citation = getattr(annotation, "url_citation", None)
        url = getattr(citation, "url", None)
        if url and url not in sources:
            sources.append(url)
    return sources


class AIClient:
    def __init__(
        self,
        api_key: str,
        model: str,
        search_model: str | None = None,
        base_url: str | None = None,
        timeout: float = 60.0,
    ):
        self.client = AsyncOpenAI(api_key=api_key, base_url=base_url, timeout=timeout)
        self.model = model
        self.search_model = search_model or model

    async def complete(
        self,
        prompt: str,
        system: str | None = None,
        json_mode: bool = False,
        temperature: float | None = None,
        web_search: bool = False,
    ) -> AICompletion:
        """Run one chat completion.

        With ``web_search`` the search model is used and cited URLs come back
        in ``sources``.
        """
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": prompt})

        kwargs = {}
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}
        if temperature is not None:
            kwargs["temperature"] = temperature
        if web_search:
            kwargs["web_search_options"] = {}

        try:
            response = await self.client.chat.completions.create(
                model=self.search_model if web_search else self.model,
                messages=messages,
                **kwargs,
            )
        except OpenAIError as exc:
            raise AIServiceError(str(exc)) from exc

        message = response.choices[0].message
        return AICompletion(text=message.content or "", sources=extract_sources(message))

    async def generate_json(
        self,
        prompt: str,
        system: str | None = None,
        temperature: float | None = None,
    ) -> dict | None:
        completion = await self.complete(prompt, system=system, json_mode=True, temperature=temperature)
        return clean_and_parse_json(completion.text)
