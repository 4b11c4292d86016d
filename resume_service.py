# resume_service.py

from __future__ import annotations

import logging
from typing import Dict, Optional

from portfolio_models import Resume
from record_store import RecordStore, StoreError

logger = logging.getLogger("portfolio-resume")


class ResumeUnavailable(Exception):
    pass


class ResumeService:
    """Read-only access to the resume document. Records are seeded by seed_resume.py."""

    def __init__(self, store: RecordStore, disposition: str = "inline"):
        self.store = store
        self.disposition = disposition

    def get_resume(self) -> Optional[Resume]:
        try:
            return self.store.find_one(Resume)
        except StoreError as e:
            logger.exception("Error fetching resume: %s", e)
            raise ResumeUnavailable("Failed to fetch resume") from e

    def headers_for(self, resume: Resume) -> Dict[str, str]:
        # header values must be latin-1
        filename = resume.name.replace('"', "").encode("latin-1", "replace").decode("latin-1")
        return {"Content-Disposition": f'{self.disposition}; filename="{filename}"'}
