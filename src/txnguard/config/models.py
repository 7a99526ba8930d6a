"""``txnguard.toml`` section models.

Only overrides go in the file; every key has a default here.  Both sections
spell their JSON switch ``json``, and unknown keys are rejected so a typo in
the file fails loudly instead of being ignored.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class OutputConfig(BaseModel):
    """``[output]``: ``json`` prints results as JSON, ``quiet`` as one line."""

    model_config = {"frozen": True, "extra": "forbid"}

    json_output: bool = Field(default=False, alias="json")
    quiet: bool = False


class LoggingConfig(BaseModel):
    """``[logging]``: ``verbose`` enables DEBUG, ``json`` renders JSON lines."""

    model_config = {"frozen": True, "extra": "forbid"}

    verbose: bool = False
    json_logs: bool = Field(default=False, alias="json")
