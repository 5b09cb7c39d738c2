"""Timestamped snapshot build identity."""

import re
from dataclasses import dataclass
from datetime import datetime, timezone

from m2prune.core.errors import ParseError


BUILD_NUMBER_MAX = 2**31 - 1

_DATE_RE = re.compile(r"\d{8}", re.ASCII)
_TIME_RE = re.compile(r"\d{6}", re.ASCII)
_BUILD_RE = re.compile(r"\d+", re.ASCII)


@dataclass(frozen=True, order=True)
class VersionToken:
    """One timestamped snapshot build.

    Ordered by timestamp, then build number. Field order matters: the generated
    comparison methods compare fields as a tuple.
    """

    timestamp: datetime
    build_number: int

    @classmethod
    def parse(cls, date_digits: str, time_digits: str, build_digits: str) -> "VersionToken":
        """Parse the date, time and build number portions of a snapshot filename.

        Args:
            date_digits: Exactly 8 digits, ``yyyyMMdd``
            time_digits: Exactly 6 digits, ``HHmmss``
            build_digits: Base-10 build number

        Returns:
            The parsed token, timestamp in UTC

        Raises:
            ParseError: If any portion is malformed or out of range
        """
        if not _DATE_RE.fullmatch(date_digits):
            raise ParseError(f"Invalid snapshot date '{date_digits}'")
        if not _TIME_RE.fullmatch(time_digits):
            raise ParseError(f"Invalid snapshot time '{time_digits}'")
        if not _BUILD_RE.fullmatch(build_digits):
            raise ParseError(f"Invalid build number '{build_digits}'")

        try:
            timestamp = datetime(
                int(date_digits[0:4]),
                int(date_digits[4:6]),
                int(date_digits[6:8]),
                int(time_digits[0:2]),
                int(time_digits[2:4]),
                int(time_digits[4:6]),
                tzinfo=timezone.utc,
            )
        except ValueError as e:
            raise ParseError(
                f"Invalid snapshot timestamp '{date_digits}.{time_digits}': {e}"
            ) from e

        build_number = int(build_digits)
        if build_number > BUILD_NUMBER_MAX:
            raise ParseError(f"Build number '{build_digits}' is out of range")

        return cls(timestamp=timestamp, build_number=build_number)

    def __str__(self) -> str:
        # strftime("%Y") does not zero-pad years below 1000 on every platform
        ts = self.timestamp
        return f"{ts.year:04d}{ts:%m%d.%H%M%S}-{self.build_number}"
