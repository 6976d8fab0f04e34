import pytest

import windowless
from windowless.geometry import Rectangle
from windowless.window_graph import WindowTable


def test_lazy_exports_resolve():
    assert windowless.Rectangle is Rectangle
    assert windowless.WindowTable is WindowTable
    assert windowless.VERSION == "0.1.0"
    for name in windowless.__all__:
        assert getattr(windowless, name) is not None
    assert set(windowless.__all__) <= set(dir(windowless))


def test_unknown_attribute():
    with pytest.raises(AttributeError):
        windowless.does_not_exist
