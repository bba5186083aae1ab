"""Managed markers so a generated section can be replaced in place."""

from __future__ import annotations


class MarkerManager:
    """Wraps generated markdown in begin/end comments and swaps it on re-runs."""

    BEGIN_FMT = "<!-- apisection:begin:{key} -->"
    END_FMT = "<!-- apisection:end:{key} -->"

    def wrap(self, key: str, body: str) -> str:
        begin = self.BEGIN_FMT.format(key=key)
        end = self.END_FMT.format(key=key)
        return f"{begin}\n{body.strip()}\n{end}"

    def contains(self, markdown: str, key: str) -> bool:
        begin = self.BEGIN_FMT.format(key=key)
        end = self.END_FMT.format(key=key)
        return begin in markdown and end in markdown.split(begin, 1)[1]

    def replace(self, markdown: str, key: str, body: str) -> str:
        """Replace the managed ``key`` block; markdown without one is returned untouched."""
        if not self.contains(markdown, key):
            return markdown
        begin = self.BEGIN_FMT.format(key=key)
        end = self.END_FMT.format(key=key)
        pre, rest = markdown.split(begin, 1)
        _, post = rest.split(end, 1)
        return f"{pre}{self.wrap(key, body)}{post}"


__all__ = ["MarkerManager"]
