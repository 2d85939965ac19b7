"""Certificate panel: lists PKI certificates and applies trust/delete requests."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Protocol

STATUS_TRUSTED = "✅ Certificate trusted"
STATUS_DELETED = "✅ Certificate deleted"


class _CertificateStore(Protocol):
    def ensure_pki_structure(self) -> Any: ...

    def get_client_cert(self) -> Optional[Any]: ...

    def list_trusted_certs(self) -> list: ...

    def list_rejected_certs(self) -> list: ...

    def trust_certificate(self, path: Path) -> None: ...

    def delete_certificate(self, path: Path) -> None: ...

    def open_pki_folder(self) -> None: ...


class CertActionKind(enum.Enum):
    TRUST_CERT = "trust_cert"
    DELETE_CERT = "delete_cert"
    OPEN_PKI_FOLDER = "open_pki_folder"
    REFRESH = "refresh"


_NEEDS_PATH = (CertActionKind.TRUST_CERT, CertActionKind.DELETE_CERT)


@dataclass(frozen=True)
class CertAction:
    """A request on the certificate store; trust and delete name a file."""

    kind: CertActionKind
    path: Optional[Path] = None

    def __post_init__(self) -> None:
        if self.kind in _NEEDS_PATH and self.path is None:
            raise ValueError(f"{self.kind.value} needs a certificate path")
        if self.path is not None:
            object.__setattr__(self, "path", Path(self.path))


class CertificatesPanel:
    """Client, trusted and rejected certificates of the PKI directory."""

    def __init__(self, cert_manager: _CertificateStore) -> None:
        self.cert_manager = cert_manager
        self.client_cert: Optional[Any] = None
        self.trusted_certs: list = []
        self.rejected_certs: list = []
        self.status = ""
        self.needs_refresh = True
        try:
            cert_manager.ensure_pki_structure()
        except Exception:
            pass
        self.refresh()

    def refresh(self) -> None:
        self.client_cert = self.cert_manager.get_client_cert()
        self.trusted_certs = list(self.cert_manager.list_trusted_certs())
        self.rejected_certs = list(self.cert_manager.list_rejected_certs())
        self.needs_refresh = False

    def handle_action(self, action: CertAction) -> None:
        """Apply an action, report the outcome in status, and reload if needed."""
        kind = action.kind
        try:
            if kind is CertActionKind.TRUST_CERT:
                self.cert_manager.trust_certificate(action.path)
                self.status = STATUS_TRUSTED
                self.needs_refresh = True
            elif kind is CertActionKind.DELETE_CERT:
                self.cert_manager.delete_certificate(action.path)
                self.status = STATUS_DELETED
                self.needs_refresh = True
            elif kind is CertActionKind.OPEN_PKI_FOLDER:
                self.cert_manager.open_pki_folder()
            elif kind is CertActionKind.REFRESH:
                self.needs_refresh = True
        except Exception as exc:
            self.status = f"❌ Error: {exc}"

        if self.needs_refresh:
            self.refresh()