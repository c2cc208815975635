from __future__ import annotations
from typing import Any, Callable, Dict, Sequence

AttrFunc = Callable[[int], Dict[str, Any]]
_REGISTRY: Dict[str, AttrFunc] = {}

def register_attribute(name: str, fn: AttrFunc) -> None:
    _REGISTRY[name] = fn

def available_attributes() -> Sequence[str]:
    return sorted(_REGISTRY)

def compute_attributes(day_number: int, names: Sequence[str]) -> Dict[str, Any]:
    """Evaluate named attributes for a civil day number (Julian Day Number)."""
    out: Dict[str, Any] = {}
    for name in names:
        if name not in _REGISTRY:
            raise KeyError(f"Unknown attribute '{name}'. Available: {sorted(_REGISTRY)}")
        out.update(_REGISTRY[name](day_number))
    return out
