from dataclasses import replace

from .git_provider import GitProvider
from .models import GitUrl


class CloudforgeProvider(GitProvider):
    def resolve(self, url: GitUrl) -> GitUrl:
        return replace(
            url,
            owner=url.user,
            organization=url.resource.split(".")[0],
            source="cloudforge.com",
        )
