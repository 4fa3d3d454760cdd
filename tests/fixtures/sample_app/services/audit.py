from miraveja_registrar import Lifetime, RegistrationMode, injectable
from sample_app.contracts import IAuditLog


@injectable(Lifetime.SCOPED, RegistrationMode.MANUAL, IAuditLog)
class DatabaseAuditLog(IAuditLog):
    def __init__(self) -> None:
        self.entries = []


class AuditFormatter:
    """Not decorated, never registered."""
