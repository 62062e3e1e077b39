"""Write extraction replies to disk."""

import json
from pathlib import Path
from typing import Any

import aiofiles


def format_reply(reply: dict[str, Any], as_json: bool = False) -> str:
    """Render a reply as JSON or as plain text with a metadata header."""
    if as_json:
        return json.dumps(reply, ensure_ascii=False, indent=2) + "\n"

    if not reply.get("success"):
        return f"Error: {reply.get('error', 'unknown error')}\n"

    metadata = reply.get("metadata", {})
    lines = []
    if metadata.get("title"):
        lines.append(f"# {metadata['title']}")
    if metadata.get("url"):
        lines.append(f"Source: {metadata['url']}")
    if lines:
        lines.append("")
    lines.append(reply.get("content", ""))
    return "\n".join(lines) + "\n"


class ResultWriter:
    """Write one reply to a text or JSON file."""

    def __init__(self, output_path: Path, as_json: bool | None = None):
        self.output_path = Path(output_path)
        # Infer the format from the extension unless told otherwise
        self.as_json = self.output_path.suffix == ".json" if as_json is None else as_json

    async def write(self, reply: dict[str, Any]) -> Path:
        """Write the reply and return the path written."""
        self.output_path.parent.mkdir(parents=True, exist_ok=True)

        async with aiofiles.open(self.output_path, "w", encoding="utf-8") as f:
            await f.write(format_reply(reply, self.as_json))

        return self.output_path
