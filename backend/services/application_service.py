"""Student job applications.

The registry keeps applications in process memory; a hosted table would
sit behind the same methods.
"""

import logging
import threading

from models.schemas.application import Application, ApplicationStatus
from services.errors import ApplicationError

logger = logging.getLogger(__name__)

# Review may only move an application out of pending
_ALLOWED_REVIEW = {
    ApplicationStatus.PENDING: {ApplicationStatus.ACCEPTED, ApplicationStatus.REJECTED},
}


def can_apply(status: ApplicationStatus | None) -> bool:
    """Apply is enabled only when the student has not applied yet."""
    return status is None


class ApplicationRegistry:

    def __init__(self):
        self._lock = threading.Lock()
        self._applications: dict[tuple[str, str], Application] = {}

    def apply(self, student_id: str, company_id: str) -> Application:
        with self._lock:
            key = (student_id, company_id)
            if key in self._applications:
                raise ApplicationError("You have already applied to this company")
            application = Application(student_id=student_id, company_id=company_id)
            self._applications[key] = application
        logger.info("Student %s applied to %s", student_id, company_id)
        return application

    def status(self, student_id: str, company_id: str) -> ApplicationStatus | None:
        with self._lock:
            application = self._applications.get((student_id, company_id))
        return application.status if application else None

    def review(self, student_id: str, company_id: str, status: ApplicationStatus) -> Application:
        with self._lock:
            key = (student_id, company_id)
            current = self._applications.get(key)
            if current is None:
                raise ApplicationError("No application found for this student and company")
            if status not in _ALLOWED_REVIEW.get(current.status, set()):
                raise ApplicationError(
                    f"Cannot change application from {current.status.value} to {status.value}"
                )
            updated = current.model_copy(update={"status": status})
            self._applications[key] = updated
        logger.info("Application %s -> %s marked %s", student_id, company_id, status.value)
        return updated
