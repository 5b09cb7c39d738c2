"""Name grammars for repository directories and timestamped snapshot files.

Both patterns must stay bit-compatible with existing local repositories, so
they are matched against the whole name and restricted to ASCII digits.
"""

import re
from typing import NamedTuple


SNAPSHOT_SUFFIX = "-SNAPSHOT"
SNAPSHOT_MARKER = "SNAPSHOT"

VERSION_DIR_PATTERN = re.compile(
    r"^(?P<major>\d+)(\.)?(?P<minor>\d+)?(\.)?(?P<rest>.+)?(-)?(?P<qualifier>.+)?$",
    re.ASCII,
)
TIMESTAMPED_BUILD_PATTERN = re.compile(
    r"^(?P<date>\d{8})\.(?P<time>\d{6})-(?P<build>\d+)(?P<tail>.+)$",
    re.ASCII,
)


class VersionDirMatch(NamedTuple):
    """A directory name that looks like a version."""

    name: str
    major: str
    minor: str | None

    @property
    def is_snapshot(self) -> bool:
        return self.name.endswith(SNAPSHOT_SUFFIX)


class TimestampedBuildMatch(NamedTuple):
    """The portion of a file name following the artifact-version prefix."""

    date: str
    time: str
    build: str
    tail: str


def match_version_dir(name: str) -> VersionDirMatch | None:
    """Match a directory name against the version grammar."""
    m = VERSION_DIR_PATTERN.fullmatch(name)
    if m is None:
        return None
    return VersionDirMatch(name=name, major=m.group("major"), minor=m.group("minor"))


def match_timestamped_build(remainder: str) -> TimestampedBuildMatch | None:
    """Match a file name remainder against the timestamped build grammar."""
    m = TIMESTAMPED_BUILD_PATTERN.fullmatch(remainder)
    if m is None:
        return None
    return TimestampedBuildMatch(
        date=m.group("date"),
        time=m.group("time"),
        build=m.group("build"),
        tail=m.group("tail"),
    )


def snapshot_file_prefix(artifact_id: str, snapshot_dir_name: str) -> str:
    """Build the file name prefix shared by all builds in a snapshot directory.

    ``my-artifact`` and ``1.2.3-SNAPSHOT`` give ``my-artifact-1.2.3-``; the
    hyphen before the marker stays part of the base version.
    """
    base_version = snapshot_dir_name[: len(snapshot_dir_name) - len(SNAPSHOT_MARKER)]
    return f"{artifact_id}-{base_version}"
