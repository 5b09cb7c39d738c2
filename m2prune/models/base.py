"""Base model for all m2prune Pydantic models.

This module provides a base model class that enforces consistent serialization
behavior across all m2prune models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class M2PruneBaseModel(BaseModel):
    """Base model class for all m2prune Pydantic models.

    This class enforces consistent serialization behavior:
    - by_alias=True: Use field aliases for serialization
    - mode="json": Use JSON-compatible serialization (e.g., Path -> str)
    """

    model_config = ConfigDict(
        str_strip_whitespace=True,
        use_enum_values=True,
        # Validate assignment after model creation
        validate_assignment=True,
    )

    def to_dict(self) -> dict[str, Any]:
        """Convert model to dictionary with consistent serialization parameters.

        Returns:
            Dictionary representation using JSON-compatible serialization
        """
        return self.model_dump(by_alias=True, mode="json")


__all__ = ["M2PruneBaseModel"]
