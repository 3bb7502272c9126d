"""OpenAI-backed region insight generator."""

from __future__ import annotations

from .base import TextGenerator
from ..core.config import settings
from ..core.errors import GenerationError


class OpenAITextGenerator(TextGenerator):
    def __init__(self, api_key: str | None = None, model: str | None = None, client=None):
        self.api_key = api_key or settings.OPENAI_API_KEY
        self.model = model or settings.OPENAI_MODEL
        self._client = client

    def _get_client(self):
        if self._client is not None:
            return self._client
        if not self.api_key:
            raise GenerationError("OPENAI_API_KEY missing from settings")

        # Imported lazily so the package stays optional for the template provider
        from openai import AsyncOpenAI

        self._client = AsyncOpenAI(api_key=self.api_key)
        return self._client

    async def generate(self, prompt: str, region: str) -> str:
        """Ask the chat-completions API for a short summary of the region.

        Parameters
        ----------
        prompt: str
            Fully rendered analyst prompt.
        region: str
            Normalized outcode; only used in error messages here.

        Returns
        -------
        str
            Stripped summary text, never empty.
        """
        client = self._get_client()
        try:
            completion = await client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": "Answer in plain prose, at most five sentences."},
                    {"role": "user", "content": prompt},
                ],
                temperature=0.3,
            )
            content = completion.choices[0].message.content
        except Exception as exc:  # network, auth, quota
            raise GenerationError(f"OpenAI request failed for region {region}") from exc

        summary = (content or "").strip()
        if not summary:
            raise GenerationError(f"Empty summary returned for region {region}")
        return summary
