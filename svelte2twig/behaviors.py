"""Wrap Svelte lifecycle hooks into Drupal behavior scripts."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any, Mapping, Optional

from jinja2 import Environment, FileSystemLoader

_TEMPLATE_NAME = "behavior.js.j2"
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]")


def behavior_id(theme: str, component_name: str) -> str:
    """Return the ``Drupal.behaviors`` key for a component, e.g. ``mytheme_my_card``."""
    return "_".join([theme, _NON_ALNUM.sub("_", component_name)]).lower()


def find_hook_body(data: Mapping[str, Any], source: str, hook: str) -> Optional[str]:
    """Return the source text of the callback body passed to ``hook()`` in the instance script.

    ``data`` is the raw Svelte ``parse()`` output; offsets index into ``source``.
    """
    instance = data.get("instance") or {}
    content = instance.get("content") if isinstance(instance, Mapping) else None
    body = content.get("body") if isinstance(content, Mapping) else None
    for statement in body or []:
        if not isinstance(statement, Mapping) or statement.get("type") != "ExpressionStatement":
            continue
        call = statement.get("expression") or {}
        callee = call.get("callee") or {}
        if call.get("type") != "CallExpression" or callee.get("name") != hook:
            continue
        arguments = call.get("arguments") or []
        if not arguments:
            return None
        function_body = arguments[0].get("body") or {}
        if function_body.get("type") == "BlockStatement":
            statements = function_body.get("body") or []
            if not statements:
                return None
            return source[statements[0]["start"] : statements[-1]["end"]]
        # Concise arrow body: ``onMount(() => init())``.
        if "start" in function_body and "end" in function_body:
            return source[function_body["start"] : function_body["end"]] + ";"
        return None
    return None


class BehaviorScriptBuilder:
    """Renders ``onMount``/``onDestroy`` callbacks as a Drupal behavior."""

    def __init__(self, theme: str, templates_dir: Path | None = None) -> None:
        self.theme = theme
        self.templates_dir = templates_dir or Path(__file__).with_name("templates")
        self._env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=False,
            keep_trailing_newline=True,
        )

    def build(self, component_name: str, data: Mapping[str, Any], source: str) -> Optional[str]:
        """Return the behavior script, or None when the component has no ``onMount`` hook."""
        attach_body = find_hook_body(data, source, "onMount")
        if attach_body is None:
            return None
        detach_body = find_hook_body(data, source, "onDestroy")
        template = self._env.get_template(_TEMPLATE_NAME)
        return template.render(
            behavior_id=behavior_id(self.theme, component_name),
            attach_body=attach_body.replace(".attach(document", ".attach(context"),
            detach_body=detach_body,
        )


__all__ = ["BehaviorScriptBuilder", "behavior_id", "find_hook_body"]
