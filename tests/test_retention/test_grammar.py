"""Tests for directory and file name grammars."""

import pytest

from m2prune.retention.grammar import (
    match_timestamped_build,
    match_version_dir,
    snapshot_file_prefix,
)


class TestVersionDirGrammar:
    """Test match_version_dir."""

    @pytest.mark.parametrize(
        "name",
        ["1", "1.0", "1.2.3", "1.0-SNAPSHOT", "2.0.0-beta-1", "10.4.RELEASE", "3-rc"],
    )
    def test_version_names_match(self, name):
        assert match_version_dir(name) is not None

    @pytest.mark.parametrize(
        "name", ["com", "my-artifact", "SNAPSHOT", "v1.0", "x1.0-SNAPSHOT", "", "１.0"]
    )
    def test_non_version_names_do_not_match(self, name):
        assert match_version_dir(name) is None

    def test_snapshot_flag(self):
        assert match_version_dir("1.0-SNAPSHOT").is_snapshot
        assert not match_version_dir("1.0").is_snapshot
        assert not match_version_dir("1.0-snapshot").is_snapshot

    def test_named_groups(self):
        match = match_version_dir("1.2.3-SNAPSHOT")
        assert match.major == "1"
        assert match.minor == "2"


class TestTimestampedBuildGrammar:
    """Test match_timestamped_build."""

    def test_match_with_extension(self):
        match = match_timestamped_build("20230105.093000-2.jar")

        assert match is not None
        assert match.date == "20230105"
        assert match.time == "093000"
        assert match.build == "2"
        assert match.tail == ".jar"

    def test_match_with_classifier(self):
        match = match_timestamped_build("20230105.093000-12-sources.jar")

        assert match.build == "12"
        assert match.tail == "-sources.jar"

    @pytest.mark.parametrize(
        "remainder",
        [
            "maven-metadata.xml",
            "20230105.093000-2",  # no trailing part
            "2023010.093000-2.jar",
            "20230105-093000-2.jar",
            "20230105.093000.jar",
            "SNAPSHOT.jar",
        ],
    )
    def test_non_matching(self, remainder):
        assert match_timestamped_build(remainder) is None


class TestSnapshotFilePrefix:
    """Test snapshot_file_prefix."""

    def test_prefix_keeps_hyphen_before_timestamp(self):
        assert snapshot_file_prefix("my-artifact", "1.2.3-SNAPSHOT") == "my-artifact-1.2.3-"

    def test_prefix_for_qualified_version(self):
        assert snapshot_file_prefix("lib", "2.0-beta-SNAPSHOT") == "lib-2.0-beta-"
