from indenture.generation.client_base import BaseGenerationClient
from indenture.generation.factory import GenerationClientFactory

__all__ = ["BaseGenerationClient", "GenerationClientFactory"]
