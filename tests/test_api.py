from __future__ import annotations

from fastapi.testclient import TestClient

from main import app

client = TestClient(app)


def test_health() -> None:
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_fit_conjugated_verb() -> None:
    response = client.post("/fit", json={"word": "行った", "furigana": "[行|い]く"})
    assert response.status_code == 200
    assert response.json() == {
        "word": "行った",
        "furigana": "[行|い]った",
        "reading": "いった",
    }


def test_fit_reading_is_hiragana() -> None:
    response = client.post("/fit", json={"word": "コピーした", "furigana": "コピーする"})
    assert response.status_code == 200
    body = response.json()
    assert body["furigana"] == "コピーした"
    assert body["reading"] == "こぴーした"


def test_fit_irregular_verb() -> None:
    response = client.post("/fit", json={"word": "来た", "furigana": "[来|く]る"})
    assert response.status_code == 200
    assert response.json()["furigana"] == "[来|き]た"


def test_fit_error_is_unprocessable() -> None:
    response = client.post("/fit", json={"word": "音楽あ", "furigana": "[音楽|おん|がく]"})
    assert response.status_code == 422
    assert response.json()["detail"] == {
        "error": "word_too_long",
        "message": "The word is too long to fit the furigana",
    }


def test_fit_missing_field_is_rejected() -> None:
    response = client.post("/fit", json={"word": "行った"})
    assert response.status_code == 422


def test_parse() -> None:
    response = client.post("/parse", json={"furigana": "[引|ひ]っ[掛|か]かる"})
    assert response.status_code == 200
    body = response.json()
    assert body["kanji"] == "引っ掛かる"
    assert body["kana"] == "ひっかかる"
    assert body["segments"] == [
        {"type": "kanji", "text": "引", "readings": ["ひ"]},
        {"type": "kana", "text": "っ", "readings": []},
        {"type": "kanji", "text": "掛", "readings": ["か"]},
        {"type": "kana", "text": "かる", "readings": []},
    ]
