"""Shared type aliases used across havenox modules."""

from collections.abc import Callable
from typing import Any, TypeAlias

# Route handler: receives a RequestContext, returns a response value
Handler: TypeAlias = Callable[..., Any]

# Lifecycle hook: zero-argument sync or async callable
Hook: TypeAlias = Callable[[], Any]
