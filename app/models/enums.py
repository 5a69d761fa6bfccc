from enum import Enum


class EmployeeStatus(str, Enum):
    ACTIVE = "Ativo"
    ON_LEAVE = "Afastado"
    TERMINATED = "Desligado"


class EventType(str, Enum):
    ABSENCE = "Falta"
    TARDINESS = "Atraso"
    WARNING = "Advertência"
    COMMENDATION = "Elogio"


class EventSeverity(str, Enum):
    LIGHT = "Leve"
    MEDIUM = "Média"
    SEVERE = "Grave"


class DocumentCategory(str, Enum):
    CONTRACT = "Contrato"
    DECLARATION = "Declaração"
    MEDICAL_CERTIFICATE = "Atestado"
    OTHER = "Outro"


class UserRole(str, Enum):
    MANAGER = "Gerente"
    SUPERVISOR = "Gestor"
