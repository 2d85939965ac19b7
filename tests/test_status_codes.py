import pytest

from opcuadiag.status_codes import status_code_color, translate_status_code


def test_translate_good():
    assert translate_status_code(0x00000000) == "Good"


def test_translate_bad_certificate():
    assert translate_status_code(0x801C0000) == "Bad - Certificate Untrusted"


def test_translate_unknown():
    result = translate_status_code(0x80FF0000)
    assert "Bad" in result
    assert "0x80FF0000" in result


def test_translate_unknown_uncertain_uses_severity():
    assert translate_status_code(0x40FF0000) == "Uncertain (0x40FF0000)"


def test_translate_unknown_good_uses_severity():
    assert translate_status_code(0x00000099) == "Good (0x00000099)"


def test_top_severity_bits_count_as_bad():
    assert translate_status_code(0xC0000000).startswith("Bad")


@pytest.mark.parametrize(
    "code, expected",
    [
        (0x40000000, "Uncertain"),
        (0x800B0000, "Bad - Timeout"),
        (0x80CD0000, "Bad - No Delete Rights"),
    ],
)
def test_translate_known(code, expected):
    assert translate_status_code(code) == expected


@pytest.mark.parametrize("code", [-1, 0x1_0000_0000])
def test_out_of_range_rejected(code):
    with pytest.raises(ValueError):
        translate_status_code(code)


def test_colors_by_severity():
    assert status_code_color(0) == (0, 200, 0)
    assert status_code_color(0x40000000) == (255, 200, 0)
    assert status_code_color(0x80000000) == (255, 50, 50)
    assert status_code_color(0xC0000000) == (255, 50, 50)