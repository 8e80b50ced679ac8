from dataclasses import replace
from typing import Optional

from .git_provider import GitProvider
from .models import GitUrl

# Order matters: `issues` wins over `tree` but not over `blob`. Keep it as is,
# existing consumers rely on how ambiguous paths are split.
MARKER_PRIORITY = ("blob", "issues", "tree", "commit", "src", "raw", "edit")
FILEPATH_TYPES = ("raw", "src", "blob", "tree", "edit")

# Markers are only looked for after the first two segments (owner and name).
MARKER_START = 2


class GenericProvider(GitProvider):
    """GitHub, GitLab, Bitbucket and any self-hosted forge with similar paths."""

    def resolve(self, url: GitUrl) -> GitUrl:
        splits = url.name.split("/")
        name_index = len(splits) - 1
        owner, name, commit = url.owner, url.name, None

        if len(splits) >= 2:
            name_index = find_name_index(splits)
            owner = "/".join(splits[:name_index])
            name = splits[name_index]

            if find_marker(splits, "commit") >= 0 and find_marker(splits, "issues") < 0:
                commit = segment_at(splits, name_index + 2)

        ref = filepathtype = filepath = ""

        offset = name_index + 1 if segment_at(splits, name_index + 1) == "-" else name_index
        if len(splits) > offset + 2 and splits[offset + 1] in FILEPATH_TYPES:
            filepathtype = splits[offset + 1]
            ref = splits[offset + 2]
            filepath = "/".join(splits[offset + 3 :])

        return replace(
            url,
            owner=owner,
            name=name,
            organization=owner,
            commit=commit,
            ref=ref,
            filepathtype=filepathtype,
            filepath=filepath,
        )


def find_marker(splits: list[str], marker: str) -> int:
    try:
        return splits.index(marker, MARKER_START)
    except ValueError:
        return -1


def find_name_index(splits: list[str]) -> int:
    """Index of the repository name: the segment right before the marker."""
    dash = find_marker(splits, "-")
    if dash >= 0:
        return dash - 1

    blob, tree = find_marker(splits, "blob"), find_marker(splits, "tree")
    if blob >= 0 and tree >= 0:
        return min(blob, tree) - 1

    for marker in MARKER_PRIORITY:
        index = find_marker(splits, marker)
        if index >= 0:
            return index - 1

    return len(splits) - 1


def segment_at(splits: list[str], index: int) -> Optional[str]:
    return splits[index] if index < len(splits) else None
