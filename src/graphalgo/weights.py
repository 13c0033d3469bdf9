"""Edge-weight extractors and A* heuristics.

Both are plain callables injected at construction time.  They must be
deterministic and free of side effects; otherwise repeated runs on the
same graph are no longer guaranteed to agree.

A weight extractor takes either ``(attrs)`` or ``(attrs, source, target)``.
``resolve_weight_fn`` inspects the arity once and normalizes both forms to
the three-argument call the algorithms make.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Mapping
from typing import Any, TypeAlias

from graphalgo.exceptions import InvalidArgumentError
from graphalgo.types import NodeId

EdgeWeightFn: TypeAlias = Callable[[Mapping[str, Any], NodeId, NodeId], float]
"""``(attrs, source, target) -> weight``"""

WeightFn: TypeAlias = Callable[..., float]
"""``(attrs) -> weight`` or ``(attrs, source, target) -> weight``"""

HeuristicFn: TypeAlias = Callable[[NodeId, NodeId], float]
"""``(node, goal) -> estimated remaining cost``"""

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def default_weight(attrs: Mapping[str, Any], source: NodeId, target: NodeId) -> float:
    """Read the ``"weight"`` attribute, falling back to ``1.0``."""
    return float(attrs.get("weight", 1.0))


def weight_by(key: str, default: float = 1.0) -> EdgeWeightFn:
    """Build an extractor that reads *key* instead of ``"weight"``."""

    def extract(attrs: Mapping[str, Any], source: NodeId, target: NodeId) -> float:
        return float(attrs.get(key, default))

    extract.__name__ = f"weight_by_{key}"
    return extract


def zero_heuristic(node: NodeId, goal: NodeId) -> float:
    """Constant-zero heuristic; A* with it explores exactly like Dijkstra."""
    return 0.0


def resolve_weight_fn(weight_fn: WeightFn | None) -> EdgeWeightFn:
    """Return a three-argument extractor for *weight_fn*.

    ``None`` gives ``default_weight``.  A callable taking only the attribute
    mapping is wrapped.  Raises ``InvalidArgumentError`` for any other arity.
    """
    if weight_fn is None:
        return default_weight
    try:
        params = list(inspect.signature(weight_fn).parameters.values())
    except (TypeError, ValueError):
        # no introspectable signature (some builtins); trust the full form
        return weight_fn

    if any(p.kind is inspect.Parameter.VAR_POSITIONAL for p in params):
        return weight_fn
    positional = [p for p in params if p.kind in _POSITIONAL]
    required = [p for p in positional if p.default is inspect.Parameter.empty]
    if len(positional) >= 3 and len(required) <= 3:
        return weight_fn
    if len(required) <= 1 and positional:

        def extract(attrs: Mapping[str, Any], source: NodeId, target: NodeId) -> float:
            return weight_fn(attrs)

        extract.__name__ = getattr(weight_fn, "__name__", "extract")
        return extract

    msg = "weight_fn must accept (attrs) or (attrs, source, target)"
    raise InvalidArgumentError(msg)
