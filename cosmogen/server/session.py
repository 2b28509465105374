"""Universe registry for the HTTP API."""

import logging
import uuid
from dataclasses import dataclass, field
from typing import Optional, Tuple

from ..engine.universe import Universe
from ..utils.constants import DEFAULT_SIZE_RANGE

logger = logging.getLogger(__name__)


@dataclass
class UniverseSession:
    """One registered universe and the id clients address it by."""

    id: str
    universe: Universe
    requests_served: int = 0

    def touch(self) -> Universe:
        self.requests_served += 1
        return self.universe


@dataclass
class UniverseRegistry:
    """Keeps Universe instances alive between requests.

    Each session owns its Universe, so galaxy caches are never shared
    between clients even when they use the same seed.
    """

    sessions: dict[str, UniverseSession] = field(default_factory=dict)

    def create(
        self, seed: Optional[int] = None, size_range: Tuple[float, float] = DEFAULT_SIZE_RANGE
    ) -> UniverseSession:
        """Create and register a universe.

        Raises:
            ValueError: If seed or size_range is invalid
        """
        universe = Universe(seed=seed, size_range=size_range)
        session_id = f"uni-{uuid.uuid4().hex[:12]}"
        session = UniverseSession(id=session_id, universe=universe)
        self.sessions[session_id] = session
        logger.info(f"Created universe {session_id} (seed={universe.seed}, sizes={size_range})")
        return session

    def get(self, session_id: str) -> Optional[UniverseSession]:
        return self.sessions.get(session_id)

    def delete(self, session_id: str) -> bool:
        if session_id in self.sessions:
            del self.sessions[session_id]
            logger.info(f"Deleted universe {session_id}")
            return True
        return False
