from app.models.document import Document
from app.models.employee import Employee
from app.models.event import OperationalEvent
from app.models.user import AppUser

__all__ = [ "AppUser", "Document", "Employee", "OperationalEvent" ]
