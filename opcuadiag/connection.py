"""Connection panel state: diagnostics, endpoint selection and connect requests."""

from __future__ import annotations

import enum
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

OPC_TCP_SCHEME = "opc.tcp://"
DEFAULT_PORT = 4840


class SecurityPolicy(enum.Enum):
    NONE = "None"
    BASIC128RSA15 = "Basic128Rsa15"
    BASIC256 = "Basic256"
    BASIC256SHA256 = "Basic256Sha256"
    AES128_SHA256_RSAOAEP = "Aes128Sha256RsaOaep"
    AES256_SHA256_RSAPSS = "Aes256Sha256RsaPss"

    @staticmethod
    def from_endpoint_name(name: str) -> "SecurityPolicy":
        """Policy named by a discovered endpoint; unknown names mean no security."""
        return _POLICY_NAMES.get(name, SecurityPolicy.NONE)


_POLICY_NAMES: dict[str, SecurityPolicy] = {
    "None": SecurityPolicy.NONE,
    "Basic128Rsa15": SecurityPolicy.BASIC128RSA15,
    "Basic256": SecurityPolicy.BASIC256,
    "Basic256Sha256": SecurityPolicy.BASIC256SHA256,
    "Aes128Sha256RsaOaep": SecurityPolicy.AES128_SHA256_RSAOAEP,
    "Aes128-Sha256-RsaOaep": SecurityPolicy.AES128_SHA256_RSAOAEP,
    "Aes256Sha256RsaPss": SecurityPolicy.AES256_SHA256_RSAPSS,
    "Aes256-Sha256-RsaPss": SecurityPolicy.AES256_SHA256_RSAPSS,
}


class MessageSecurityMode(enum.Enum):
    NONE = "None"
    SIGN = "Sign"
    SIGN_AND_ENCRYPT = "SignAndEncrypt"

    @staticmethod
    def from_endpoint_name(name: str) -> "MessageSecurityMode":
        """Mode named by a discovered endpoint; anything else means sign and encrypt."""
        if name == "None":
            return MessageSecurityMode.NONE
        if name == "Sign":
            return MessageSecurityMode.SIGN
        return MessageSecurityMode.SIGN_AND_ENCRYPT


class ConnectionActionKind(enum.Enum):
    CONNECT = "connect"
    DISCONNECT = "disconnect"
    START_DIAGNOSTIC = "start_diagnostic"
    CANCEL_DIAGNOSTIC = "cancel_diagnostic"


@dataclass(frozen=True)
class ConnectionAction:
    """A request raised from the connection panel.

    CONNECT carries the client settings, START_DIAGNOSTIC the raw server input.
    """

    kind: ConnectionActionKind
    server_input: Optional[str] = None
    endpoint_url: Optional[str] = None
    security_policy: Optional[SecurityPolicy] = None
    security_mode: Optional[MessageSecurityMode] = None
    username: Optional[str] = None
    password: Optional[str] = field(default=None, repr=False)

    @property
    def uses_credentials(self) -> bool:
        return self.username is not None


def _normalise_connect_url(server_input: str) -> str:
    if server_input.startswith(OPC_TCP_SCHEME):
        return server_input
    if ":" in server_input:
        return f"{OPC_TCP_SCHEME}{server_input}"
    return f"{OPC_TCP_SCHEME}{server_input}:{DEFAULT_PORT}"


@dataclass
class ConnectionPanel:
    """Everything the user has entered and learned about the target server."""

    server_input: str = ""
    security_policy: SecurityPolicy = SecurityPolicy.NONE
    security_mode: MessageSecurityMode = MessageSecurityMode.NONE
    use_auth: bool = False
    username: str = ""
    password: str = field(default="", repr=False)
    is_connecting: bool = False
    is_diagnosing: bool = False
    diagnostic_log: list = field(default_factory=list)
    diagnostic_result: Optional[Any] = None
    discovered_endpoints: list = field(default_factory=list)
    selected_endpoint: Optional[int] = None
    diagnostic_start: Optional[float] = None
    clock: Callable[[], float] = field(default=time.monotonic, repr=False)

    @property
    def security_locked(self) -> bool:
        """Security settings follow the chosen endpoint once one is selected."""
        return self.selected_endpoint is not None

    def add_diagnostic_step(self, step: Any) -> None:
        """Record a step, replacing an earlier report with the same id."""
        for position, existing in enumerate(self.diagnostic_log):
            if existing.id == step.id:
                self.diagnostic_log[position] = step
                return
        self.diagnostic_log.append(step)

    def set_diagnostic_result(self, result: Any) -> None:
        self.is_diagnosing = False
        self.discovered_endpoints = list(result.endpoints)
        self.diagnostic_result = result
        self.diagnostic_start = None

    def reset_diagnostic(self) -> None:
        self.is_diagnosing = False
        self.diagnostic_log.clear()
        self.diagnostic_result = None
        self.discovered_endpoints.clear()
        self.selected_endpoint = None
        self.diagnostic_start = None

    def start_diagnostic(self) -> None:
        self.is_diagnosing = True
        self.diagnostic_log.clear()
        self.diagnostic_result = None
        self.diagnostic_start = self.clock()

    def request_diagnostic(self, is_connected: bool, app_busy: bool) -> ConnectionAction:
        """Start a diagnostic of the current server input."""
        if not self.server_input:
            raise ValueError("no server given to diagnose")
        if not self.is_interactive(is_connected, app_busy):
            raise RuntimeError("the panel is busy or already connected")
        self.start_diagnostic()
        return ConnectionAction(
            ConnectionActionKind.START_DIAGNOSTIC, server_input=self.server_input
        )

    def cancel_diagnostic(self) -> ConnectionAction:
        self.reset_diagnostic()
        return ConnectionAction(ConnectionActionKind.CANCEL_DIAGNOSTIC)

    def set_connecting(self, connecting: bool) -> None:
        self.is_connecting = bool(connecting)

    def is_interactive(self, is_connected: bool, app_busy: bool) -> bool:
        return not (is_connected or app_busy or self.is_connecting or self.is_diagnosing)

    def elapsed_text(self, now: Optional[float] = None) -> Optional[str]:
        """Whole seconds since the diagnostic started, or None when none runs."""
        if self.diagnostic_start is None:
            return None
        if now is None:
            now = self.clock()
        return f"{int(max(0.0, now - self.diagnostic_start))}s"

    def select_endpoint(self, index: int) -> None:
        """Adopt a discovered endpoint's security settings."""
        if not 0 <= index < len(self.discovered_endpoints):
            raise IndexError(f"no discovered endpoint at index {index}")
        endpoint = self.discovered_endpoints[index]
        self.selected_endpoint = index
        self.security_policy = SecurityPolicy.from_endpoint_name(
            endpoint.security_policy_name
        )
        self.security_mode = MessageSecurityMode.from_endpoint_name(endpoint.security_mode)
        self.use_auth = not endpoint.allows_anonymous()

    def load_bookmark(self, bookmark: Any) -> None:
        """Fill the form from a saved server."""
        self.server_input = bookmark.endpoint_url
        self.security_policy = bookmark.security_policy
        self.security_mode = bookmark.security_mode
        auth = getattr(bookmark, "auth_method", None)
        username = getattr(auth, "username", None)
        if username is None:
            self.use_auth = False
            self.username = ""
            self.password = ""
        else:
            self.use_auth = True
            self.username = username
            self.password = getattr(auth, "password", "")

    def resolve_endpoint_url(self) -> str:
        """The diagnostic's recommended URL, else the input made into an opc.tcp URL."""
        result = self.diagnostic_result
        recommended = getattr(result, "recommended_url", None) if result is not None else None
        if recommended is not None:
            return recommended
        return _normalise_connect_url(self.server_input)

    def bookmark_url(self) -> str:
        if self.server_input.startswith(OPC_TCP_SCHEME):
            return self.server_input
        return f"{OPC_TCP_SCHEME}{self.server_input}"

    def connect(self, is_connected: bool, app_busy: bool) -> ConnectionAction:
        """Build a connect request from the form."""
        if not self.server_input:
            raise ValueError("no server given to connect to")
        if not self.is_interactive(is_connected, app_busy):
            raise RuntimeError("the panel is busy or already connected")
        return ConnectionAction(
            ConnectionActionKind.CONNECT,
            endpoint_url=self.resolve_endpoint_url(),
            security_policy=self.security_policy,
            security_mode=self.security_mode,
            username=self.username if self.use_auth else None,
            password=self.password if self.use_auth else None,
        )

    def disconnect(self) -> ConnectionAction:
        return ConnectionAction(ConnectionActionKind.DISCONNECT)