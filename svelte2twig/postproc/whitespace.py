"""Whitespace normalisation for generated Twig templates."""

from __future__ import annotations

from typing import List


class TwigWhitespaceNormalizer:
    """Trims trailing spaces and collapses blank-line runs outside ``<pre>`` blocks."""

    def normalize(self, template: str) -> str:
        normalized = template.replace("\r\n", "\n").replace("\r", "\n")
        lines = normalized.split("\n")
        cleaned: List[str] = []
        in_pre = False
        previous_blank = False

        for line in lines:
            if in_pre:
                cleaned.append(line)
                if "</pre>" in line:
                    in_pre = False
                previous_blank = False
                continue

            stripped = line.rstrip()
            if "<pre" in stripped and "</pre>" not in stripped:
                in_pre = True

            if not stripped:
                if previous_blank or not cleaned:
                    continue
                previous_blank = True
                cleaned.append("")
                continue

            cleaned.append(stripped)
            previous_blank = False

        while cleaned and cleaned[-1] == "":
            cleaned.pop()

        return "\n".join(cleaned) + "\n"


__all__ = ["TwigWhitespaceNormalizer"]
