"""Reusable JSON Schemas for generator responses."""
from __future__ import annotations

from importlib import resources
import json
from functools import lru_cache
from typing import Any


@lru_cache(maxsize=None)
def load_audience_rules_schema() -> dict[str, Any]:
    """Return the JSON schema describing a generated audience rule list."""
    with resources.files(__name__).joinpath("audience_rules.schema.json").open(
        "r", encoding="utf-8"
    ) as fp:
        return json.load(fp)
