"""Application layer - Collection and logging of diagnostic events."""

import logging
from typing import List, Optional

from miraveja_registrar.domain import DiagnosticCode, DiagnosticEvent, DiagnosticSeverity, IDiagnosticSink

logger = logging.getLogger(__name__)

_LOG_LEVELS = {
    DiagnosticSeverity.INFO: logging.INFO,
    DiagnosticSeverity.WARNING: logging.WARNING,
    DiagnosticSeverity.ERROR: logging.ERROR,
    DiagnosticSeverity.FATAL: logging.CRITICAL,
}

_DEFAULT_SEVERITIES = {
    DiagnosticCode.START: DiagnosticSeverity.INFO,
    DiagnosticCode.FOUND: DiagnosticSeverity.INFO,
    DiagnosticCode.MISSING_BASE_KIND: DiagnosticSeverity.FATAL,
    DiagnosticCode.EMPTY_RESULT: DiagnosticSeverity.WARNING,
    DiagnosticCode.CONFIGURATION_ERROR: DiagnosticSeverity.ERROR,
    DiagnosticCode.MANUAL_INTERFACE_SKIPPED: DiagnosticSeverity.WARNING,
    DiagnosticCode.COMPLETE: DiagnosticSeverity.INFO,
}


class DiagnosticCollector(IDiagnosticSink):
    """Keeps diagnostic events in report order and mirrors them to the log.

    Attributes:
        _events: Events reported so far.
    """

    def __init__(self) -> None:
        self._events: List[DiagnosticEvent] = []

    def report(self, event: DiagnosticEvent) -> None:
        self._events.append(event)
        logger.log(_LOG_LEVELS[event.severity], "[%s] %s", event.code, event.message)

    def emit(
        self,
        code: DiagnosticCode,
        message: str,
        severity: Optional[DiagnosticSeverity] = None,
        declared_type: Optional[str] = None,
        annotation_kind: Optional[str] = None,
    ) -> DiagnosticEvent:
        """Build and report an event, using the code's default severity unless given.

        Returns:
            The reported event.
        """
        event = DiagnosticEvent(
            code=code,
            severity=severity or _DEFAULT_SEVERITIES[code],
            message=message,
            declared_type=declared_type,
            annotation_kind=annotation_kind,
        )
        self.report(event)
        return event

    def events(self) -> List[DiagnosticEvent]:
        return list(self._events)

    def clear(self) -> None:
        self._events.clear()
