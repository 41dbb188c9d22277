from __future__ import annotations

import logging
import threading
from typing import List, Optional

from ..core.constants import SEED_LECTURES
from .model import Lecture
from .repository import LectureRepository

logger = logging.getLogger(__name__)


class LectureService:
    """Use case: expose the lecture catalogue.

    The catalogue is seeded lazily: the first read that finds the store empty
    inserts the fixed demo lectures. Clients rely on this, so the ensure-seeded
    step is part of every listing.
    """

    def __init__(self, lectures: LectureRepository):
        self._lectures = lectures
        self._seed_lock = threading.Lock()

    def ensure_seeded(self) -> bool:
        """Insert the seed lectures if the store is empty; True if it seeded now."""
        with self._seed_lock:
            if self._lectures.count() > 0:
                return False
            self._lectures.insert_many(SEED_LECTURES)
        logger.info("Seeded %d lectures", len(SEED_LECTURES))
        return True

    def list_lectures(self) -> List[Lecture]:
        self.ensure_seeded()
        return list(self._lectures.list_all())

    def get_lecture(self, lecture_id: int) -> Optional[Lecture]:
        return self._lectures.get_by_id(lecture_id)
