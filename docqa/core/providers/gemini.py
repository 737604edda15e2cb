"""
Google Gemini providers.

Live embedding and generation through langchain-google-genai.

Dependencies: langchain_google_genai, langchain_core
System role: Production providers selected by configuration
"""

import logging

from langchain_google_genai import ChatGoogleGenerativeAI, GoogleGenerativeAIEmbeddings

logger = logging.getLogger(__name__)


class GeminiEmbeddingProvider:
    """Embedding provider backed by a Gemini embedding model."""

    def __init__(
        self,
        model: str = "models/gemini-embedding-001",
        api_key: str | None = None,
    ) -> None:
        """
        Initialize Gemini embeddings client.

        Args:
            model: Google embedding model ID
            api_key: Google API key (falls back to GOOGLE_API_KEY env var)
        """
        kwargs = {"google_api_key": api_key} if api_key else {}
        self._embeddings = GoogleGenerativeAIEmbeddings(model=model, **kwargs)
        logger.info(f"{__name__}:__init__ - Initialized with model={model}")

    async def embed(self, text: str) -> list[float]:
        return list(await self._embeddings.aembed_query(text))


class GeminiGenerationProvider:
    """Generation provider backed by a Gemini chat model."""

    def __init__(
        self,
        model: str = "gemini-3-flash-preview",
        api_key: str | None = None,
        temperature: float = 0.0,
    ) -> None:
        """
        Initialize Gemini chat client.

        Args:
            model: Gemini chat model ID
            api_key: Google API key (falls back to GOOGLE_API_KEY env var)
            temperature: Sampling temperature (0.0 for deterministic)
        """
        kwargs = {"google_api_key": api_key} if api_key else {}
        self._model = ChatGoogleGenerativeAI(model=model, temperature=temperature, **kwargs)
        logger.info(f"{__name__}:__init__ - Initialized with model={model}")

    async def generate(self, prompt: str) -> str:
        message = await self._model.ainvoke(prompt)
        content = message.content
        if isinstance(content, list):
            # Multi-part responses: keep the text parts in order
            content = "".join(
                part if isinstance(part, str) else part.get("text", "")
                for part in content
            )
        return str(content)
