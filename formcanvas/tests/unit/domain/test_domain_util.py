from __future__ import annotations

import pytest

from formcanvas.domain.util import coerce_bool


@pytest.mark.parametrize("value", [True, 1, 2.5, "1", "true", " TRUE ", "yes", "on"])
def test_coerce_bool_truthy(value) -> None:
    assert coerce_bool(value) is True


@pytest.mark.parametrize("value", [False, 0, 0.0, "0", "false", "no", "off", "", None])
def test_coerce_bool_falsy(value) -> None:
    assert coerce_bool(value) is False
