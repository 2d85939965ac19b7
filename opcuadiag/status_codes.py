"""Human-readable descriptions of OPC UA status codes."""

from __future__ import annotations

_MAX_CODE = 0xFFFFFFFF

_DESCRIPTIONS: dict[int, str] = {
    0x00000000: "Good",
    0x00000001: "Good - Clamped",
    0x00000002: "Good - More Data",
    0x00000003: "Good - Communication Event",
    0x00000004: "Good - Shutdown Event",
    0x00000005: "Good - Call Again",
    0x00000006: "Good - No Data",
    0x40000000: "Uncertain",
    0x40010000: "Uncertain - Initial Value",
    0x40020000: "Uncertain - Sensor Calibration",
    0x40030000: "Uncertain - Engineering Units Exceeded",
    0x40040000: "Uncertain - Sub Normal",
    0x40050000: "Uncertain - Last Usable Value",
    0x40A50000: "Uncertain - Data Sub Normal",
    0x80000000: "Bad - Unexpected Error",
    0x80010000: "Bad - Internal Error",
    0x80020000: "Bad - Out Of Memory",
    0x80030000: "Bad - Resource Unavailable",
    0x80040000: "Bad - Communication Error",
    0x80050000: "Bad - Encoding Error",
    0x80060000: "Bad - Decoding Error",
    0x80070000: "Bad - Encoding Limits Exceeded",
    0x80080000: "Bad - Request Too Large",
    0x80090000: "Bad - Response Too Large",
    0x800A0000: "Bad - Unknown Response",
    0x800B0000: "Bad - Timeout",
    0x800C0000: "Bad - Service Unsupported",
    0x800D0000: "Bad - Shutdown",
    0x800E0000: "Bad - Server Not Connected",
    0x800F0000: "Bad - Server Halted",
    0x80100000: "Bad - Nothing To Do",
    0x80110000: "Bad - Too Many Operations",
    0x80120000: "Bad - Too Many Monitored Items",
    0x80130000: "Bad - Data Type ID Unknown",
    0x80140000: "Bad - Certificate Invalid",
    0x80150000: "Bad - Security Checks Failed",
    0x80160000: "Bad - Certificate Time Invalid",
    0x80170000: "Bad - Certificate Issuer Time Invalid",
    0x80180000: "Bad - Certificate Host Name Invalid",
    0x80190000: "Bad - Certificate URI Invalid",
    0x801A0000: "Bad - Certificate Use Not Allowed",
    0x801B0000: "Bad - Certificate Issuer Use Not Allowed",
    0x801C0000: "Bad - Certificate Untrusted",
    0x801D0000: "Bad - Certificate Revocation Unknown",
    0x801E0000: "Bad - Certificate Issuer Revocation Unknown",
    0x801F0000: "Bad - Certificate Revoked",
    0x80200000: "Bad - Certificate Issuer Revoked",
    0x80210000: "Bad - Certificate Chain Incomplete",
    0x80220000: "Bad - User Access Denied",
    0x80230000: "Bad - Identity Token Invalid",
    0x80240000: "Bad - Identity Token Rejected",
    0x80250000: "Bad - Secure Channel ID Invalid",
    0x80260000: "Bad - Invalid Timestamp",
    0x80270000: "Bad - Nonce Invalid",
    0x80280000: "Bad - Session ID Invalid",
    0x80290000: "Bad - Session Closed",
    0x802A0000: "Bad - Session Not Activated",
    0x802B0000: "Bad - Subscription ID Invalid",
    0x80890000: "Bad - Node ID Invalid",
    0x808A0000: "Bad - Node ID Unknown",
    0x808B0000: "Bad - Attribute ID Invalid",
    0x808C0000: "Bad - Index Range Invalid",
    0x808D0000: "Bad - Index Range No Data",
    0x808E0000: "Bad - Data Encoding Invalid",
    0x808F0000: "Bad - Data Encoding Unsupported",
    0x80900000: "Bad - Not Readable",
    0x80910000: "Bad - Not Writable",
    0x80920000: "Bad - Out Of Range",
    0x80930000: "Bad - Not Supported",
    0x80940000: "Bad - Not Found",
    0x80950000: "Bad - Object Deleted",
    0x80960000: "Bad - Not Implemented",
    0x80970000: "Bad - Monitoring Mode Invalid",
    0x80980000: "Bad - Monitored Item ID Invalid",
    0x80990000: "Bad - Monitored Item Filter Not Supported",
    0x809A0000: "Bad - Monitored Item Filter Unsupported",
    0x809B0000: "Bad - Filter Not Allowed",
    0x809C0000: "Bad - Structure Missing",
    0x809D0000: "Bad - Event Filter Invalid",
    0x809E0000: "Bad - Content Filter Invalid",
    0x809F0000: "Bad - Filter Operator Invalid",
    0x80A00000: "Bad - Filter Operator Unsupported",
    0x80A10000: "Bad - Filter Operand Count Mismatch",
    0x80A20000: "Bad - Filter Operand Invalid",
    0x80A30000: "Bad - Filter Element Invalid",
    0x80A40000: "Bad - Filter Literal Invalid",
    0x80A80000: "Bad - Continuation Point Invalid",
    0x80A90000: "Bad - No Continuation Points",
    0x80AA0000: "Bad - Reference Type ID Invalid",
    0x80AB0000: "Bad - Browse Direction Invalid",
    0x80AC0000: "Bad - Node Not In View",
    0x80AD0000: "Bad - Numeric Overflow",
    0x80AE0000: "Bad - Server URI Invalid",
    0x80AF0000: "Bad - Server Name Missing",
    0x80B00000: "Bad - Discovery URL Missing",
    0x80B10000: "Bad - Semaphore File Missing",
    0x80B20000: "Bad - Request Type Invalid",
    0x80B30000: "Bad - Security Mode Rejected",
    0x80B40000: "Bad - Security Policy Rejected",
    0x80B50000: "Bad - Too Many Sessions",
    0x80B60000: "Bad - User Signature Invalid",
    0x80B70000: "Bad - Application Signature Invalid",
    0x80B80000: "Bad - No Valid Certificates",
    0x80B90000: "Bad - Identity Change Not Supported",
    0x80BD0000: "Bad - Request Cancelled By Request",
    0x80BE0000: "Bad - Parent Node ID Invalid",
    0x80BF0000: "Bad - Reference Not Allowed",
    0x80C10000: "Bad - Node ID Rejected",
    0x80C20000: "Bad - Node ID Exists",
    0x80C30000: "Bad - Node Class Invalid",
    0x80C40000: "Bad - Browse Name Invalid",
    0x80C50000: "Bad - Browse Name Duplicated",
    0x80C60000: "Bad - Node Attributes Invalid",
    0x80C70000: "Bad - Type Definition Invalid",
    0x80C80000: "Bad - Source Node ID Invalid",
    0x80C90000: "Bad - Target Node ID Invalid",
    0x80CA0000: "Bad - Duplicate Reference Not Allowed",
    0x80CB0000: "Bad - Invalid Self Reference",
    0x80CC0000: "Bad - Reference Local Only",
    0x80CD0000: "Bad - No Delete Rights",
}

_SEVERITY_NAMES = ("Good", "Uncertain", "Bad", "Bad")


def _check_code(code: int) -> int:
    if not 0 <= code <= _MAX_CODE:
        raise ValueError(f"status code out of 32-bit range: {code!r}")
    return code


def translate_status_code(code: int) -> str:
    """Describe a status code, falling back to its severity and hex value."""
    code = _check_code(code)
    known = _DESCRIPTIONS.get(code)
    if known is not None:
        return known
    return f"{_SEVERITY_NAMES[code >> 30]} (0x{code:08X})"


def status_code_color(code: int) -> tuple[int, int, int]:
    """RGB colour for the severity of a status code."""
    severity = _check_code(code) >> 30
    if severity == 0:
        return (0, 200, 0)
    if severity == 1:
        return (255, 200, 0)
    return (255, 50, 50)