from unittest.mock import MagicMock, patch

from sa import utils


def test_ngettext() -> None:
    assert utils.ngettext(True, "CPU", "CPUs") == "CPU"
    assert utils.ngettext(False, "CPU", "CPUs") == "CPUs"


def test_isclose() -> None:
    assert utils.isclose(4.0, 4.0 + 1e-12)
    assert not utils.isclose(4.0, 4.001)
    assert utils.isclose([1.0, 2.0], [1.0, 2.0 + 1e-12])
    assert not utils.isclose([1.0, 2.0], [1.0, 2.1])
    assert not utils.isclose([1.0, 2.0], [1.0])


@patch("builtins.print")
def test_display_platform(mock: MagicMock) -> None:
    utils.display_platform()
    mock.assert_called_once()
    assert "Python" in mock.call_args.args[0]
