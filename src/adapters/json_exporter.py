"""JSON export of drill results.

Why JSON:
- Lets other tools consume a permission scan without scraping the text output.
- Stable formatting (sorted keys, indent) keeps diffs readable.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel


def dump_result_json(result: BaseModel) -> str:
    payload = result.model_dump(mode="json")
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_result_json(*, result: BaseModel, output_path: Path) -> Path:
    """Write any drill result model to a UTF-8 JSON file."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dump_result_json(result), encoding="utf-8")
    return output_path
