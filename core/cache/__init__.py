"""Result caching and single-flight coordination.

Modules:
- ResultCache: Bounded in-memory translation result cache with a TTL.
- InFlightManager: Shares one running operation between concurrent callers.
"""

from core.cache.inflight_manager import InFlightManager
from core.cache.manager import ResultCache

__all__: list[str] = ["InFlightManager", "ResultCache"]
