import pytest

from opcuadiag.notifications import (
    MAX_NOTIFICATIONS,
    ErrorNotification,
    ErrorPanel,
    ErrorSeverity,
    Language,
    get_common_errors,
)


class FakeClock:
    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now


def make_panel():
    clock = FakeClock()
    return ErrorPanel(clock=clock), clock


def test_severity_icons_and_colors():
    assert ErrorSeverity.INFO.icon() == "ℹ️"
    assert ErrorSeverity.WARNING.icon() == "⚠️"
    assert ErrorSeverity.ERROR.icon() == "❌"
    assert ErrorSeverity.ERROR.color() == (255, 80, 80)
    assert len({s.color() for s in ErrorSeverity}) == 3


def test_with_details_returns_copy():
    base = ErrorNotification("msg", ErrorSeverity.WARNING, timestamp=5.0)
    detailed = base.with_details("more")
    assert detailed.details == "more"
    assert base.details is None
    assert detailed.message == base.message
    assert detailed.timestamp == base.timestamp


def test_toast_lifetime():
    n = ErrorNotification("m", ErrorSeverity.INFO, timestamp=100.0)
    assert n.is_toast_active(100.0)
    assert n.is_toast_active(104.9)
    assert not n.is_toast_active(105.0)
    assert not n.is_toast_active(200.0)


def test_toast_alpha_fades_in_last_second():
    n = ErrorNotification("m", ErrorSeverity.INFO, timestamp=0.0)
    assert n.toast_alpha(1.0) == 1.0
    assert n.toast_alpha(4.0) == 1.0
    assert n.toast_alpha(4.5) == pytest.approx(0.5)
    assert n.toast_alpha(10.0) == 0.0
    alphas = [n.toast_alpha(t / 10) for t in range(40, 51)]
    assert alphas == sorted(alphas, reverse=True)


def test_age_text():
    n = ErrorNotification("m", ErrorSeverity.INFO, timestamp=0.0)
    assert n.age_text(5.0) == "5s ago"
    assert n.age_text(59.9) == "59s ago"
    assert n.age_text(150.0) == "2m ago"


def test_common_errors_match_between_languages():
    english = get_common_errors(Language.ENGLISH)
    spanish = get_common_errors(Language.SPANISH)
    assert len(english) == len(spanish) == 10
    assert [c for c, _, _ in english] == [c for c, _, _ in spanish]
    assert english[7] == (
        "BadTimeout",
        "Timeout",
        "The operation took too long. Check network connectivity.",
    )
    assert spanish[0][1] == "Certificado inválido"


def test_common_errors_returns_fresh_list():
    first = get_common_errors(Language.ENGLISH)
    first.clear()
    assert len(get_common_errors(Language.ENGLISH)) == 10


def test_add_error_newest_first():
    panel, clock = make_panel()
    panel.add_error("first", ErrorSeverity.ERROR)
    clock.now += 1
    panel.add_error("second", ErrorSeverity.WARNING)
    assert [n.message for n in panel.notifications] == ["second", "first"]
    assert panel.notifications[0].timestamp == clock.now


def test_add_error_caps_length():
    panel, _ = make_panel()
    for i in range(MAX_NOTIFICATIONS + 5):
        panel.add_error(f"e{i}", ErrorSeverity.ERROR)
    assert len(panel.notifications) == MAX_NOTIFICATIONS
    assert panel.notifications[0].message == f"e{MAX_NOTIFICATIONS + 4}"
    assert panel.notifications[-1].message == "e5"


def test_add_error_with_details():
    panel, _ = make_panel()
    panel.add_error_with_details("boom", "stack", ErrorSeverity.ERROR)
    assert panel.notifications[0].details == "stack"
    assert panel.notifications[0].severity is ErrorSeverity.ERROR


def test_clear():
    panel, _ = make_panel()
    panel.add_error("x", ErrorSeverity.INFO)
    panel.clear()
    assert len(panel.notifications) == 0
    assert not panel.has_active_toasts()


def test_active_toasts_limited_and_expire():
    panel, clock = make_panel()
    for i in range(5):
        panel.add_error(f"e{i}", ErrorSeverity.ERROR)
    toasts = panel.active_toasts()
    assert [t.message for t in toasts] == ["e4", "e3", "e2"]
    assert panel.has_active_toasts()
    clock.now += 10
    assert panel.active_toasts() == []
    assert not panel.has_active_toasts()
    assert len(panel.notifications) == 5