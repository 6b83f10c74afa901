import pytest
from nullable.core.types import NOTHING, Some
from nullable.functional.utils import check_callable, check_nullable


def test_check_callable():
    check_callable(len, "caller")
    with pytest.raises(TypeError, match="caller expects a callable, got int"):
        check_callable(1, "caller")


def test_check_nullable():
    check_nullable(Some(1), "caller")
    check_nullable(NOTHING, "caller")
    with pytest.raises(TypeError, match="from_optional"):
        check_nullable(None, "caller")
