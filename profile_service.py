# profile_service.py

from __future__ import annotations

import logging
import threading
from typing import Tuple

from portfolio_models import EDITABLE_FIELDS, Profile, ProfileUpdate
from record_store import RecordStore, StoreError

logger = logging.getLogger("portfolio-profile")

UPDATED_MESSAGE = "Profile updated successfully"


class ProfileUnavailable(Exception):
    """The profile could not be read or written. Message is safe to show."""


class ProfileService:
    def __init__(self, store: RecordStore):
        self.store = store
        # lookup + create must not interleave, or two first readers both create
        self._create_lock = threading.Lock()

    def get_profile(self) -> Profile:
        """Return the current profile, creating the default one if the store has none."""
        try:
            with self._create_lock:
                profile = self.store.find_one(Profile)
                if profile is None:
                    logger.info("no profile stored, creating default")
                    profile = self.store.create(Profile, {})
            return profile
        except StoreError as e:
            logger.exception("Error fetching profile: %s", e)
            raise ProfileUnavailable("Failed to fetch profile data") from e

    def update_profile(self, patch: ProfileUpdate) -> Tuple[str, Profile]:
        """
        Overwrite the editable fields that carry a non-empty value in `patch`.

        With no stored profile, one is created from every field the client
        sent (empty strings included) on top of the schema defaults.
        """
        try:
            with self._create_lock:
                profile = self.store.find_one(Profile)
                if profile is None:
                    profile = self.store.create(Profile, patch.sent_fields())
                    return UPDATED_MESSAGE, profile

            changes = patch.changes()
            for field in EDITABLE_FIELDS:
                if field in changes:
                    setattr(profile, field, changes[field])

            profile = self.store.save(profile)
            logger.info("profile id=%s updated fields=%s", profile.id, sorted(changes))
            return UPDATED_MESSAGE, profile
        except StoreError as e:
            logger.exception("Error updating profile: %s", e)
            raise ProfileUnavailable("Failed to update profile") from e
