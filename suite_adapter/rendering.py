"""Rendering of result trees into colored, indented log lines."""

from collections.abc import Iterator
from dataclasses import dataclass

from suite_adapter.models.result import (
    Failed,
    FailureDetail,
    GroupResult,
    Ignored,
    ResultNode,
)

RED = "\033[31m"
GREEN = "\033[32m"
BLUE = "\033[34m"
CYAN = "\033[36m"
RESET = "\033[0m"


@dataclass(frozen=True, kw_only=True)
class Palette:
    """ANSI colorizer; a disabled palette returns text unchanged."""

    enabled: bool = True

    def _paint(self, code: str, text: str) -> str:
        return f"{code}{text}{RESET}" if self.enabled else text

    def red(self, text: str) -> str:
        return self._paint(RED, text)

    def green(self, text: str) -> str:
        return self._paint(GREEN, text)

    def blue(self, text: str) -> str:
        return self._paint(BLUE, text)

    def cyan(self, text: str) -> str:
        return self._paint(CYAN, text)


def _render_detail(detail: FailureDetail, palette: Palette) -> str:
    if detail.is_value_mismatch:
        return (
            f"{palette.blue(detail.actual or '')} did not satisfy "
            f"{palette.cyan(detail.expected or '')}"
        )
    return palette.red(detail.description)


def _walk(
    node: ResultNode, depth: int, palette: Palette, indent: str
) -> Iterator[str]:
    prefix = indent * depth

    if isinstance(node, GroupResult):
        if node.failed:
            yield f"{prefix}{palette.red(f'- {node.name}')}"
        else:
            yield f"{prefix}{palette.green('+')} {node.name}"
        for child in node.children:
            yield from _walk(child, depth + 1, palette, indent)
        return

    match node.outcome:
        case Ignored():
            return
        case Failed(detail=detail):
            yield f"{prefix}{palette.red(f'- {node.name}')}"
            yield f"{indent * (depth + 1)}{_render_detail(detail, palette)}"
        case _:
            yield f"{prefix}{palette.green('+')} {node.name}"


def render_lines(
    tree: ResultNode, palette: Palette | None = None, indent: str = "  "
) -> list[str]:
    """Render a result tree depth-first, in declaration order.

    Ignored tests produce no lines. Each failed test is followed by one
    detail line, nested one level deeper.
    """
    return list(_walk(tree, 0, palette or Palette(), indent))
