"""Error notifications: severities, toasts and the common-error reference."""

from __future__ import annotations

import enum
import time
from collections import deque
from dataclasses import dataclass, field, replace
from typing import Callable, Optional

MAX_NOTIFICATIONS = 10
TOAST_DURATION_SECS = 5
MAX_VISIBLE_TOASTS = 3

Color = tuple[int, int, int]


class Language(enum.Enum):
    ENGLISH = "en"
    SPANISH = "es"


class ErrorSeverity(enum.Enum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"

    def icon(self) -> str:
        return _ICONS[self]

    def color(self) -> Color:
        return _COLORS[self]


_ICONS = {
    ErrorSeverity.INFO: "ℹ️",
    ErrorSeverity.WARNING: "⚠️",
    ErrorSeverity.ERROR: "❌",
}

_COLORS: dict[ErrorSeverity, Color] = {
    ErrorSeverity.INFO: (100, 180, 255),
    ErrorSeverity.WARNING: (255, 200, 50),
    ErrorSeverity.ERROR: (255, 80, 80),
}


@dataclass(frozen=True)
class ErrorNotification:
    """A single notification, stamped with a monotonic time in seconds."""

    message: str
    severity: ErrorSeverity
    timestamp: float = field(default_factory=time.monotonic)
    details: Optional[str] = None

    def with_details(self, details: str) -> "ErrorNotification":
        return replace(self, details=str(details))

    def _elapsed(self, now: Optional[float]) -> float:
        if now is None:
            now = time.monotonic()
        return max(0.0, now - self.timestamp)

    def is_toast_active(self, now: Optional[float] = None) -> bool:
        """True while the notification is still young enough to show as a toast."""
        return int(self._elapsed(now)) < TOAST_DURATION_SECS

    def toast_alpha(self, now: Optional[float] = None) -> float:
        """Opacity of the toast: fully opaque, fading out over the last second."""
        elapsed = self._elapsed(now)
        fade_start = TOAST_DURATION_SECS - 1.0
        alpha = 1.0 - (elapsed - fade_start) if elapsed > fade_start else 1.0
        return min(1.0, max(0.0, alpha))

    def age_text(self, now: Optional[float] = None) -> str:
        secs = int(self._elapsed(now))
        if secs < 60:
            return f"{secs}s ago"
        return f"{secs // 60}m ago"


_COMMON_ERRORS: dict[Language, list[tuple[str, str, str]]] = {
    Language.ENGLISH: [
        ("BadCertificateInvalid", "Certificate is invalid", "The server rejected your client certificate. Try regenerating it."),
        ("BadCertificateHostNameInvalid", "Certificate hostname mismatch", "The certificate hostname doesn't match the server. Check your endpoint URL."),
        ("BadCertificateUntrusted", "Certificate not trusted", "The server certificate is not trusted. Add it to your trusted certificates."),
        ("BadSecurityModeRejected", "Security mode rejected", "The server doesn't support this security mode. Try a different security policy."),
        ("BadIdentityTokenRejected", "Authentication failed", "Username/password rejected. Check your credentials."),
        ("BadUserAccessDenied", "Access denied", "Your user account doesn't have permission to access this resource."),
        ("BadConnectionClosed", "Connection closed", "The server closed the connection. It may have restarted or timed out."),
        ("BadTimeout", "Timeout", "The operation took too long. Check network connectivity."),
        ("BadNotConnected", "Not connected", "No active connection to the server."),
        ("BadServiceUnsupported", "Service not supported", "The server doesn't support this operation."),
    ],
    Language.SPANISH: [
        ("BadCertificateInvalid", "Certificado inválido", "El servidor rechazó tu certificado de cliente. Intenta regenerarlo."),
        ("BadCertificateHostNameInvalid", "Nombre de host no coincide", "El nombre de host del certificado no coincide con el servidor."),
        ("BadCertificateUntrusted", "Certificado no confiable", "El certificado del servidor no es confiable. Agrégalo a certificados confiables."),
        ("BadSecurityModeRejected", "Modo de seguridad rechazado", "El servidor no soporta este modo de seguridad. Prueba otra política."),
        ("BadIdentityTokenRejected", "Autenticación fallida", "Usuario/contraseña rechazados. Verifica tus credenciales."),
        ("BadUserAccessDenied", "Acceso denegado", "Tu cuenta no tiene permiso para acceder a este recurso."),
        ("BadConnectionClosed", "Conexión cerrada", "El servidor cerró la conexión. Puede haberse reiniciado."),
        ("BadTimeout", "Tiempo agotado", "La operación tardó demasiado. Verifica la conectividad de red."),
        ("BadNotConnected", "No conectado", "No hay conexión activa al servidor."),
        ("BadServiceUnsupported", "Servicio no soportado", "El servidor no soporta esta operación."),
    ],
}


def get_common_errors(lang: Language) -> list[tuple[str, str, str]]:
    """(code, description, suggested solution) for frequent OPC UA errors."""
    return list(_COMMON_ERRORS[Language(lang)])


@dataclass
class ErrorPanel:
    """Most-recent-first list of notifications, capped in length."""

    notifications: deque = field(
        default_factory=lambda: deque(maxlen=MAX_NOTIFICATIONS)
    )
    show_panel: bool = False
    show_reference: bool = False
    clock: Callable[[], float] = time.monotonic

    def _push(self, notification: ErrorNotification) -> None:
        self.notifications.appendleft(notification)

    def add_error(self, message: str, severity: ErrorSeverity) -> None:
        self._push(ErrorNotification(str(message), severity, self.clock()))

    def add_error_with_details(
        self, message: str, details: str, severity: ErrorSeverity
    ) -> None:
        self._push(
            ErrorNotification(str(message), severity, self.clock()).with_details(details)
        )

    def clear(self) -> None:
        self.notifications.clear()

    def has_active_toasts(self, now: Optional[float] = None) -> bool:
        if now is None:
            now = self.clock()
        return any(n.is_toast_active(now) for n in self.notifications)

    def active_toasts(self, now: Optional[float] = None) -> list[ErrorNotification]:
        """The newest few notifications still within their toast lifetime."""
        if now is None:
            now = self.clock()
        active = (n for n in self.notifications if n.is_toast_active(now))
        return [n for _, n in zip(range(MAX_VISIBLE_TOASTS), active)]