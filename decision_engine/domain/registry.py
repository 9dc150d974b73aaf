"""In-memory client registry with set-once age binding"""

import logging
import threading
from dataclasses import replace
from typing import Dict, Iterable, List, Optional

from decision_engine.domain.exceptions import InvalidAgeError
from decision_engine.domain.models import AgeReconciliation, ClientRecord


class ClientRegistry:
    """
    Client records keyed by personal code.

    Records are append-only. The only mutation is filling in an empty age,
    which swaps in a new record under that client's lock so concurrent
    first-time requests cannot both win.
    """

    def __init__(self, records: Iterable[ClientRecord] = ()):
        self._records: Dict[str, ClientRecord] = {}
        self._locks: Dict[str, threading.Lock] = {}
        self._registry_lock = threading.Lock()
        for record in records:
            self.add(record)

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, personal_id: str) -> bool:
        return personal_id in self._records

    def add(self, record: ClientRecord) -> bool:
        """Append a record. Returns False if the personal code is already registered (first one wins)"""
        with self._registry_lock:
            if record.personal_id in self._records:
                logging.warning("Duplicate client record ignored", extra={"personal_code": record.personal_id})
                return False
            self._locks[record.personal_id] = threading.Lock()
            self._records[record.personal_id] = record
            return True

    def records(self) -> List[ClientRecord]:
        """Snapshot of all records in load order"""
        return list(self._records.values())

    def find(self, personal_id: str) -> Optional[ClientRecord]:
        return self._records.get(personal_id)

    def credit_modifier_of(self, personal_id: str) -> int:
        """Stored credit modifier, 0 when the client is unknown"""
        record = self.find(personal_id)
        return record.credit_modifier if record else 0

    def age_of(self, personal_id: str) -> Optional[str]:
        record = self.find(personal_id)
        return record.age if record else None

    def reconcile_age(self, personal_id: str, submitted_age: str) -> AgeReconciliation:
        """
        Bind the submitted age to the client record.

        - empty stored age + empty submission: InvalidAgeError (first-time users must supply it)
        - empty stored age: store the submission
        - stored age differs from the submission: InvalidAgeError (conflict, never overwritten)

        Raises:
            InvalidAgeError: On a missing first-time age or a conflicting age
        """
        lock = self._locks.get(personal_id)
        if lock is None:
            return AgeReconciliation.CLIENT_NOT_FOUND

        with lock:
            record = self._records[personal_id]
            if not record.age:
                if not submitted_age:
                    raise InvalidAgeError("Age is required for first-time users.")
                self._records[personal_id] = replace(record, age=submitted_age)
                logging.info("Client age registered", extra={"personal_code": personal_id})
                self.save()
            elif record.age != submitted_age:
                raise InvalidAgeError("Existing age data conflict. Please contact support.")

        return AgeReconciliation.RECONCILED

    def save(self) -> None:
        """Persistence hook. Records only live in memory; nothing is written."""
        logging.debug("Client registry persistence is not configured, skipping save")
