"""Embedding provider interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence


class EmbeddingProvider(ABC):
    """Turns text into fixed-dimension vectors."""

    @property
    @abstractmethod
    def model_path(self) -> str:
        """Identifier of the model producing the vectors."""

    @property
    @abstractmethod
    def dimension(self) -> int:
        """Vector dimension. Stable once initialized."""

    @property
    @abstractmethod
    def is_initialized(self) -> bool:
        """Whether initialize() has completed."""

    @abstractmethod
    async def initialize(self) -> None:
        """Load the model.

        Raises:
            InitializationError: If the model cannot be loaded
        """

    @abstractmethod
    async def embed(self, text: str) -> list[float]:
        """Embed one text.

        Raises:
            EmbeddingError: If the text is empty, the provider is not
                initialized or the model fails
        """

    async def embed_batch(self, texts: Sequence[str]) -> list[list[float]]:
        """Embed several texts in order."""
        return [await self.embed(text) for text in texts]

    @abstractmethod
    async def dispose(self) -> None:
        """Release the model. Safe to call repeatedly."""
