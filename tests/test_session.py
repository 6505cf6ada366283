from saral_backend.session import SessionContext


def test_no_user_until_language_is_selected(session):
    assert session.current_user is None
    assert session.language == "hi"
    assert session.set_language("en") is None
    assert session.update_profile("Asha", "9000000000") is None


def test_select_language_creates_user(session, store):
    user = session.select_language("en")

    assert user.preferred_language == "en"
    assert user.phone == ""
    assert user.name is None
    assert session.language == "en"
    assert store.get_current_user() == user


def test_set_language_and_profile(session, store):
    original = session.select_language("hi")

    session.set_language("en")
    updated = session.update_profile("Asha", "9000000000")

    assert updated.id == original.id
    assert updated.preferred_language == "en"
    assert store.get_current_user().name == "Asha"


def test_new_context_loads_persisted_user(session, store):
    user = session.select_language("en")

    assert SessionContext(store).current_user == user


def test_end_clears_the_current_user(session, store):
    session.select_language("en")

    session.end()

    assert session.current_user is None
    assert store.get_current_user() is None
    assert SessionContext(store).current_user is None
