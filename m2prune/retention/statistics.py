"""Running counters for one retention run."""

from pydantic import Field

from m2prune.models.base import M2PruneBaseModel


class RetentionStatistics(M2PruneBaseModel):
    """Counters accumulated by a single RetentionEngine.

    Each engine owns its own instance, so independent runs never share counts.
    """

    deleted_files: int = Field(default=0, ge=0)
    reclaimed_bytes: int = Field(default=0, ge=0)
    failed_deletes: int = Field(default=0, ge=0)
    skipped_files: int = Field(default=0, ge=0)
    listing_failures: int = Field(default=0, ge=0)

    def record_deletion(self, size: int) -> None:
        self.deleted_files += 1
        self.reclaimed_bytes += size

    def record_failed_delete(self) -> None:
        self.failed_deletes += 1

    def record_skip(self) -> None:
        """Count a file left alone because its name did not parse."""
        self.skipped_files += 1

    def record_listing_failure(self) -> None:
        self.listing_failures += 1

    @property
    def has_anomalies(self) -> bool:
        return bool(self.failed_deletes or self.skipped_files or self.listing_failures)
