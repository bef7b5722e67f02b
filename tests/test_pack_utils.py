import pytest

from concrete_utils.pack_utils import nth_param


def test_nth_param_selects_each_position():
    assert nth_param(0, 1, 2, b"\x00") == 1
    assert nth_param(1, 1, 2, b"\x00") == 2
    assert nth_param(2, 1, 2, b"\x00") == b"\x00"


def test_nth_param_returns_same_object():
    marker = object()
    assert nth_param(1, None, marker, 3) is marker


@pytest.mark.parametrize("n", [3, -1])
def test_nth_param_out_of_range(n):
    with pytest.raises(IndexError):
        nth_param(n, 1, 2, 3)