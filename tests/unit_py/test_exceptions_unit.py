import pytest

from event_emitter.exceptions import EmitterError, InvalidArgument, ListenerFailure, safe_repr


pytestmark = pytest.mark.unit


def sample_listener(*_args):
    return None


def test_error_hierarchy():
    assert issubclass(InvalidArgument, EmitterError)
    assert issubclass(InvalidArgument, TypeError)
    assert issubclass(ListenerFailure, EmitterError)
    assert issubclass(EmitterError, RuntimeError)


def test_listener_failure_describes_event_and_error():
    error = ValueError("bad")
    failure = ListenerFailure("save", sample_listener, error)
    assert failure.event_name == "save"
    assert failure.listener is sample_listener
    assert failure.error is error
    assert str(failure) == "Error in listener for event 'save': ValueError('bad')"
    assert failure.listener_name == f"{__name__}.sample_listener"


def test_listener_name_falls_back_to_repr():
    class Handler:
        def __call__(self):
            return None

        def __repr__(self):
            return "<handler>"

    handler = Handler()
    failure = ListenerFailure("x", handler, RuntimeError())
    assert failure.listener_name == "<handler>"


class _Unprintable(Exception):
    def __repr__(self):
        raise RuntimeError("no repr")


def test_safe_repr_falls_back_to_object_repr():
    assert safe_repr(ValueError("x")) == "ValueError('x')"
    assert "_Unprintable object at" in safe_repr(_Unprintable())


def test_listener_failure_survives_unprintable_error():
    failure = ListenerFailure("x", sample_listener, _Unprintable())
    assert str(failure).startswith("Error in listener for event 'x': <")
    assert "_Unprintable object at" in str(failure)
