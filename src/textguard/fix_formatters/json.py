"""Fix results as a JSON array, one object per file."""
from __future__ import annotations

import json
from collections.abc import Sequence

from textguard.results import FixResult
from textguard.types import FormatterConfig


def format(results: Sequence[FixResult], config: FormatterConfig) -> str:
    return json.dumps([result.to_dict() for result in results], indent=2)
