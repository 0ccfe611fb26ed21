"""Icon tree model — one normalized SVG element."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TreeNode(BaseModel):
    """A normalized SVG element.

    ``attr`` is None when no attribute survives normalization and ``child`` is
    None when the element has no element children; neither is ever empty.
    """

    model_config = ConfigDict(frozen=True)

    tag: str
    attr: dict[str, str] | None = None
    child: tuple[TreeNode, ...] | None = None

    def to_json(self) -> str:
        """Compact JSON with absent fields omitted, e.g. ``{"tag":"path","attr":{"d":"M0 0"}}``."""
        return self.model_dump_json(exclude_none=True)

    def iter_nodes(self):
        """Depth-first, document-order walk over this node and its descendants."""
        yield self
        for node in self.child or ():
            yield from node.iter_nodes()
