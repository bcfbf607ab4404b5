"""Test utilities for havenox applications.

::

    from havenox.testing import TestClient
"""

from havenox.testing.client import TestClient

__all__ = ["TestClient"]
