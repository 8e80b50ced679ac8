import re
from dataclasses import replace

from .git_provider import GitProvider, is_visualstudio
from .models import GitUrl

VISUALSTUDIO_SSH_RESOURCE = "vs-ssh.visualstudio.com"
AZURE_SSH_RESOURCE = "ssh.dev.azure.com"
DEFAULT_COLLECTION = "DefaultCollection"

# Azure's `version` query parameter prefixes branch names with GB ("git branch").
_BRANCH_VERSION_RE = re.compile(r"^GB")


class AzureProvider(GitProvider):
    """Azure DevOps and the older VisualStudio Team Services hosts."""

    def resolve(self, url: GitUrl) -> GitUrl:
        splits = url.name.split("/")

        if is_visualstudio(url.source):
            if url.resource != VISUALSTUDIO_SSH_RESOURCE:
                return self.__resolve_visualstudio(url, splits)
            if len(splits) == 4:
                return replace(
                    url,
                    organization=splits[1],
                    owner=splits[2],
                    name=splits[3],
                    full_name=f"{splits[2]}/{splits[3]}",
                )
            # Other SSH shapes on visualstudio.com follow the Azure HTTPS rules.
        elif url.resource == AZURE_SSH_RESOURCE:
            if len(splits) == 4:
                return replace(
                    url, organization=splits[1], owner=splits[2], name=splits[3]
                )
            return url

        return self.__resolve_azure(url, splits)

    def __resolve_visualstudio(self, url: GitUrl, splits: list[str]) -> GitUrl:
        if len(splits) == 2:
            return replace(
                url, owner=splits[1], name=splits[1], full_name=f"_git/{splits[1]}"
            )
        if len(splits) == 3:
            return resolve_collection(url, splits)
        if len(splits) == 4:
            organization, owner, name = splits[0], splits[1], splits[2]
            return replace(
                url,
                organization=organization,
                owner=owner,
                name=name,
                full_name=f"{organization}/{owner}/_git/{name}",
            )
        return url

    def __resolve_azure(self, url: GitUrl, splits: list[str]) -> GitUrl:
        if len(splits) == 5:
            url = replace(
                url,
                organization=splits[0],
                owner=splits[1],
                name=splits[4],
                full_name=f"_git/{splits[4]}",
            )
        elif len(splits) == 3:
            url = resolve_collection(url, splits)
        elif len(splits) == 4:
            url = replace(
                url,
                organization=splits[0],
                owner=splits[1],
                name=splits[3],
                full_name=f"_git/{splits[3]}",
            )

        path = url.query.get("path")
        if path:
            url = replace(url, filepath=path.lstrip("/"))

        version = url.query.get("version")
        if version:
            url = replace(url, ref=_BRANCH_VERSION_RE.sub("", version))

        return url


def resolve_collection(url: GitUrl, splits: list[str]) -> GitUrl:
    """Resolve `<collection or owner>/_git/<name>` paths."""
    name = splits[2]
    if splits[0] == DEFAULT_COLLECTION:
        return replace(
            url,
            owner=name,
            name=name,
            organization=splits[0],
            full_name=f"{splits[0]}/_git/{name}",
        )
    return replace(url, owner=splits[0], name=name, full_name=f"{splits[0]}/_git/{name}")
