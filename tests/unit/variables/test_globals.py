import pytest

from http_kit.variables import GlobalVariables


@pytest.fixture
def session() -> GlobalVariables:
    return GlobalVariables("/collections/api")


def test_set_and_get(session: GlobalVariables) -> None:
    session.set("token", "abc")

    assert session.get("token") == "abc"
    assert "token" in session
    assert len(session) == 1


def test_get_unknown_raises(session: GlobalVariables) -> None:
    with pytest.raises(KeyError, match="not set"):
        session.get("nope")


def test_delete(session: GlobalVariables) -> None:
    session.set("token", "abc")
    session.delete("token")

    assert "token" not in session
    with pytest.raises(KeyError, match="not set"):
        session.delete("token")


def test_update_and_clear(session: GlobalVariables) -> None:
    session.update({"a": "1", "b": "2"})

    assert session.as_dict() == {"a": "1", "b": "2"}

    session.clear()

    assert len(session) == 0


def test_as_dict_is_a_copy(session: GlobalVariables) -> None:
    session.set("a", "1")
    snapshot = session.as_dict()
    snapshot["a"] = "changed"

    assert session.get("a") == "1"
