import pytest

from fruityger.errors import ErrorKind, FruitygerError


def test_kind_and_message_are_kept():
    err = FruitygerError(ErrorKind.SERVICE_ERROR, "cannot find usable server")
    assert err.kind is ErrorKind.SERVICE_ERROR
    assert err.message == "cannot find usable server"
    assert str(err) == "cannot find usable server"


def test_default_kind_is_other():
    err = FruitygerError(message="unknown cover format")
    assert err.kind is ErrorKind.OTHER
    assert str(err) == "unknown cover format"


def test_empty_message_falls_back_to_kind():
    err = FruitygerError(ErrorKind.INVALID_URL_ERROR)
    assert err.message == ""
    assert str(err) == ErrorKind.INVALID_URL_ERROR.value


def test_unsupported_codec_error_with_empty_message():
    err = FruitygerError(ErrorKind.UNSUPPORTED_CODEC_ERROR, "")
    assert isinstance(err, Exception)
    assert err.kind is ErrorKind.UNSUPPORTED_CODEC_ERROR
    assert err.message == ""
    assert str(err) == ErrorKind.UNSUPPORTED_CODEC_ERROR.value


@pytest.mark.parametrize("kind", list(ErrorKind))
def test_every_kind_is_kept_on_the_error(kind):
    err = FruitygerError(kind, "details")
    assert err.kind is kind
    assert err.message == "details"
    assert str(err) == "details"


def test_empty_messages_of_different_kinds_differ():
    texts = {str(FruitygerError(kind)) for kind in ErrorKind}
    assert len(texts) == 6