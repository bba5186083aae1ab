"""Whitespace normalization for generated markdown."""

from __future__ import annotations

from typing import List


class MarkdownLinter:
    """Normalizes line endings, trailing spaces, blank runs and heading spacing."""

    def lint(self, markdown: str) -> str:
        lines = markdown.replace("\r\n", "\n").replace("\r", "\n").split("\n")
        cleaned: List[str] = []
        in_fence = False

        for raw in lines:
            line = raw.rstrip()
            if line.startswith("```"):
                in_fence = not in_fence
                cleaned.append(line)
                continue
            if in_fence:
                cleaned.append(line)
                continue
            if not line:
                if cleaned and cleaned[-1] != "":
                    cleaned.append("")
                continue
            if line.startswith("#") and cleaned and cleaned[-1] != "":
                cleaned.append("")
            cleaned.append(line)

        while cleaned and cleaned[-1] == "":
            cleaned.pop()
        return "\n".join(cleaned) + "\n" if cleaned else ""


__all__ = ["MarkdownLinter"]
