"""Base class for configuration models bound from YAML."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StrictModel(BaseModel):
    """Configuration model that rejects unknown keys.

    Derive configuration classes from this so a misspelled key is reported
    with suggestions instead of being silently dropped.
    """

    model_config = ConfigDict(extra="forbid")
