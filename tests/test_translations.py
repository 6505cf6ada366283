import pytest

from saral_backend.models import DOCUMENT_TYPES, LOAN_PURPOSES
from saral_backend.translations import TRANSLATIONS, document_label, t


def test_every_entry_has_both_languages():
    for key, entry in TRANSLATIONS.items():
        assert entry.get("hi"), key
        assert entry.get("en"), key


def test_lookup():
    assert t("getDecision", "en") == "Get Decision"
    assert t("getDecision", "hi") == "निर्णय प्राप्त करें"


def test_falls_back_to_english(monkeypatch):
    monkeypatch.setitem(TRANSLATIONS, "englishOnly", {"en": "Only English"})
    assert t("englishOnly", "hi") == "Only English"


def test_unknown_key():
    with pytest.raises(KeyError):
        t("doesNotExist", "en")


def test_labels_for_all_documents_and_purposes():
    for doc_type in DOCUMENT_TYPES:
        assert document_label(doc_type, "en")
    for purpose in LOAN_PURPOSES:
        assert t(f"purpose_{purpose}", "hi")
    assert document_label("salary_slip", "en") == "Salary Slip"
