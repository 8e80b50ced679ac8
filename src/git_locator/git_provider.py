from abc import ABC, abstractmethod
from logging import getLogger

from .models import GitUrl

logger = getLogger(__name__)

CLOUDFORGE_SOURCE = "git.cloudforge.com"
VISUALSTUDIO_SOURCE = "visualstudio.com"
AZURE_SOURCES = ("dev.azure.com", "azure.com")


class GitProvider(ABC):
    @abstractmethod
    def resolve(self, url: GitUrl) -> GitUrl:
        """Fill owner, name, organization, ref and file fields for `url`."""


def is_cloudforge(source: str) -> bool:
    return source == CLOUDFORGE_SOURCE


def is_visualstudio(source: str) -> bool:
    return source == VISUALSTUDIO_SOURCE


def is_azure_family(source: str) -> bool:
    return is_visualstudio(source) or source in AZURE_SOURCES


def build_git_provider(url: GitUrl) -> GitProvider:
    # Imported lazily to avoid mixing provider-specific logic in this module
    if is_cloudforge(url.source):
        from .cloudforge_provider import CloudforgeProvider

        provider: GitProvider = CloudforgeProvider()
    elif is_azure_family(url.source):
        from .azure_provider import AzureProvider

        provider = AzureProvider()
    else:
        from .generic_provider import GenericProvider

        provider = GenericProvider()

    logger.debug("Resolving %s with %s", url.source, type(provider).__name__)
    return provider
