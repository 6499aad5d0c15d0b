"""JSON export of fetched pages.

Why JSON:
- Interoperability with other tools and pipelines.
- Uses the wire aliases, so timestamps go back to `{"isoString": ...}`.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel


def export_page_json(*, page: BaseModel, output_path: Path) -> Path:
    """Write `page` as UTF-8 JSON with a stable layout."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = page.model_dump(mode="json", by_alias=True)
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
