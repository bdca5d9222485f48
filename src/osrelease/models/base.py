"""
Base model for os-release records.

Provides the shared pydantic configuration and serialization helpers.
"""

from pydantic import BaseModel, ConfigDict


class RecordModel(BaseModel):
    """
    Base model for parsed records.

    Provides:
    - Immutable instances (built once, never mutated)
    - Population by field name or os-release key alias
    - JSON serialization keyed by alias
    """

    model_config = ConfigDict(
        # Records are values; the parser builds them in one go
        frozen=True,
        # Populate by field name or alias
        populate_by_name=True,
        # Reject misspelled fields instead of dropping them
        extra="forbid",
    )

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return self.model_dump(by_alias=True)

    def to_json(self) -> str:
        """Convert to JSON string."""
        return self.model_dump_json(by_alias=True)
