import numpy as np
import pytest

from cache_trace import InvalidIdentifierError, check_obj_id, is_obj_id, materialize


@pytest.mark.parametrize("value", [0, -7, 2**80, "a", b"\x00", np.int64(3), np.str_("x"),
                                   ("video_1", "720p"), (1, "a")])
def test_accepts_discrete_ids(value):
    assert is_obj_id(value)
    assert check_obj_id(value) is value


@pytest.mark.parametrize("value", [1.5, np.float64(2.0), True, None, (), ((1, 2), 3), [1], {"a": 1}])
def test_rejects_non_discrete_ids(value):
    assert not is_obj_id(value)
    with pytest.raises(InvalidIdentifierError):
        check_obj_id(value)


def test_invalid_identifier_is_a_type_error():
    with pytest.raises(TypeError, match="float"):
        check_obj_id(0.5)


def test_materialize_buffers_generators_once():
    gen = (x for x in [3, 1, 3])
    assert materialize(gen) == [3, 1, 3]
    assert list(gen) == []


def test_materialize_can_skip_validation():
    assert materialize([0.5, None], validate=False) == [0.5, None]
    with pytest.raises(InvalidIdentifierError):
        materialize([1, 0.5])
