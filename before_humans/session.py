"""
Host-side generation context.

The core pipeline is synchronous and stateless. An interactive host holds
the currently displayed map here, runs generation on a worker thread, and
adopts a new map only once a run completes successfully.
"""

import random
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Dict, Optional

import structlog

from .config import Settings, settings as default_settings
from .core.pipeline import generate_biome_map
from .core.point_sampler import SamplingOptions
from .core.topography import ReferenceData
from .logging_config import configure_logging

logger = structlog.get_logger()

MAX_RANDOM_SEED = 100000


def random_seed() -> int:
    """Seed for callers that do not supply one."""
    return random.randrange(MAX_RANDOM_SEED)


class GenerationContext:
    """Owns the current map and runs generations in the background."""

    def __init__(
        self,
        reference: Optional[ReferenceData] = None,
        settings: Optional[Settings] = None,
        configure: bool = True,
    ):
        """
        Initialize the context.

        Args:
            reference: Static reference data (defaults to Greater London)
            settings: Application settings
            configure: Configure logging from the settings
        """
        self.settings = settings or default_settings
        if configure:
            configure_logging(self.settings)

        self.reference = reference or ReferenceData.london()
        self.options = SamplingOptions.from_settings(self.settings)

        self.current: Optional[Dict[str, Any]] = None
        self.current_seed: Optional[int] = None

        # Submission order; only a run newer than the adopted one replaces it
        self._lock = threading.Lock()
        self._submitted = 0
        self._adopted = 0
        self._executor = ThreadPoolExecutor(
            max_workers=self.settings.max_workers, thread_name_prefix="biome-map"
        )

    def submit(self, seed: Optional[int] = None) -> Future:
        """
        Start generating a map in the background.

        The returned future resolves to the FeatureCollection, or raises
        GenerationError. The previous map stays current on failure, and a
        run that finishes after a later submission has been adopted is not
        adopted itself.
        """
        if seed is None:
            seed = random_seed()
        with self._lock:
            self._submitted += 1
            ticket = self._submitted
        logger.info("Generation submitted", seed=seed, ticket=ticket)
        return self._executor.submit(self._run, seed, ticket)

    def generate(self, seed: Optional[int] = None) -> Dict[str, Any]:
        """Generate synchronously and adopt the result."""
        return self.submit(seed).result()

    def discard(self) -> None:
        """Forget the current map."""
        with self._lock:
            self.current = None
            self.current_seed = None

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)

    def _run(self, seed: int, ticket: int) -> Dict[str, Any]:
        collection = generate_biome_map(seed, self.reference, self.options)
        with self._lock:
            if ticket > self._adopted:
                self._adopted = ticket
                self.current = collection
                self.current_seed = seed
            else:
                logger.info("Stale generation not adopted", seed=seed, ticket=ticket,
                            adopted=self._adopted)
        return collection

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.shutdown()
        return False
