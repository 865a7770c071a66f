from __future__ import annotations

import random
import time


def random_id(prefix: str) -> str:
    """Opaque record id: <prefix>_<unix seconds><4 random digits>."""
    return f"{prefix}_{int(time.time())}{random.randint(0, 9999):04d}"


def random_staff_id() -> str:
    """Numeric staff id, typed by users on the login form."""
    return f"{int(time.time()) % 1_000_000:06d}{random.randint(0, 9999):04d}"
