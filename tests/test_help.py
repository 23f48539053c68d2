import pytest

from kdiff.help import help_text, show_help_menu


@pytest.fixture(autouse=True)
def plain(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("FORCE_COLOR", raising=False)


def test_title_line():
    text = help_text("kdiff")
    assert text.splitlines()[0] == "Kdiff - Compare pod resource requests/limits vs actual usage"


def test_usage_names_program():
    lines = help_text("mytool").splitlines()
    assert "  mytool [flags]" in lines
    assert "  mytool -n kube-system --mode limits" in lines
    assert "  mytool -A -o cpu -m limits" in lines
    assert "  mytool -d -i" in lines


def test_color_flags_listed():
    text = help_text("kdiff")
    assert "  --color-red float            Percentage threshold for red color" in text
    assert "  --color-cyan float           Percentage threshold for cyan color" in text


def test_default_thresholds_described():
    text = help_text("kdiff")
    assert "Red: above 0.0% (over requests)" in text
    assert "Yellow: -20.0% (warning zone)" in text
    assert "Cyan: below -90.0% (very under-utilized)" in text
    assert "Red: above -10.0% (near limits)" in text
    assert "Cyan: below -80.0%" in text


def test_customize_example():
    lines = help_text("kdiff").splitlines()
    assert "  kdiff --mode limits --color-red -5 --color-yellow -30 --color-cyan -70" in lines


def test_legend_is_last():
    lines = help_text("kdiff").splitlines()
    assert lines[-1] == "  Magenta - No resource requests/limits set (inf%)"


def test_show_help_menu_prints_text(capsys):
    show_help_menu("kdiff")
    assert capsys.readouterr().out == help_text("kdiff") + "\n"


def test_coloured_help_has_escapes(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    monkeypatch.delenv("ANSI_COLORS_DISABLED", raising=False)
    monkeypatch.setenv("FORCE_COLOR", "1")
    assert "\x1b[" in help_text("kdiff")