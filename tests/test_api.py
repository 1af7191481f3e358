import pytest
from fastapi.testclient import TestClient

from main import app
from interview_coach.core.rubrics import FUNDAMENTALS_SCRIPT

RESUME_TEXT = """Alex Smith
Senior Software Engineer
Work experience with Python and SQL at a fintech startup
Bachelor of Science, State University
"""


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def profile_payload(client):
    response = client.post("/api/resume/analyze", json={"text": RESUME_TEXT})
    assert response.status_code == 200
    return response.json()["profile"]


def start(client, profile_payload, **options):
    response = client.post(
        "/api/coach/sessions",
        json={"profile": profile_payload, **options},
    )
    assert response.status_code == 200
    return response.json()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_analyze_resume(client):
    response = client.post("/api/resume/analyze", json={"text": RESUME_TEXT})
    body = response.json()

    assert body["profile"]["job_title"] == "Software Engineer"
    assert body["profile"]["skills"] == ["Python", "SQL"]
    assert body["profile"]["education"] == "Bachelor of Science, State University"
    assert len(body["questions"]["technical"]) == 5
    assert len(body["questions"]["behavioral"]) == 5


def test_upload_text_resume(client):
    response = client.post(
        "/api/resume/upload",
        files={"resume": ("resume.txt", RESUME_TEXT.encode("utf-8"), "text/plain")},
    )
    assert response.status_code == 200
    assert response.json()["file_name"] == "resume.txt"
    assert response.json()["profile"]["job_title"] == "Software Engineer"


def test_upload_rejects_unsupported_type(client):
    response = client.post(
        "/api/resume/upload",
        files={"resume": ("resume.png", b"\x89PNG", "image/png")},
    )
    assert response.status_code == 400


def test_start_session_defaults_to_resume_script(client, profile_payload):
    body = start(client, profile_payload)

    assert body["script"] == "resume"
    assert body["mode"] == "evaluated"
    assert body["total_slots"] == 11
    assert body["welcome"]["id"] == 1
    assert body["welcome"]["sender"] == "coach"
    assert "Software Engineer" in body["welcome"]["text"]


def test_full_turn_cycle(client, profile_payload):
    session_id = start(client, profile_payload, script="fundamentals")["session_id"]
    url = f"/api/coach/sessions/{session_id}/messages"

    welcome = client.post(url, json={"text": "yes"}).json()
    assert welcome["action"] == "advance"
    assert welcome["question_index"] == 1
    assert welcome["message"]["text"] == FUNDAMENTALS_SCRIPT[0][0]

    ignored = client.post(url, json={"text": "   "}).json()
    assert ignored["action"] == "ignored"
    assert ignored["message"] is None
    assert ignored["question_index"] == 1

    rejected = client.post(url, json={"text": "it's just a protocol"}).json()
    assert rejected["action"] == "remediate"
    assert rejected["question_index"] == 1

    accepted = client.post(
        url, json={"text": "HTTPS uses TLS encryption and certificates for security"}
    ).json()
    assert accepted["action"] == "advance"
    assert accepted["question_index"] == 2

    state = client.get(f"/api/coach/sessions/{session_id}").json()
    assert state["question_index"] == 2
    assert state["current_prompt"] == FUNDAMENTALS_SCRIPT[1][0]
    assert [m["id"] for m in state["transcript"]] == [1, 2, 3, 4, 5, 6, 7]
    assert state["speech_status"] is None


def test_unconditional_mode_from_request(client, profile_payload):
    session_id = start(client, profile_payload, mode="unconditional")["session_id"]
    turn = client.post(
        f"/api/coach/sessions/{session_id}/messages", json={"text": "no"}
    ).json()
    assert turn["action"] == "advance"


def test_end_session(client, profile_payload):
    session_id = start(client, profile_payload)["session_id"]

    assert client.delete(f"/api/coach/sessions/{session_id}").status_code == 200
    assert client.get(f"/api/coach/sessions/{session_id}").status_code == 404
    assert client.delete(f"/api/coach/sessions/{session_id}").status_code == 404


def test_unknown_session(client):
    assert client.get("/api/coach/sessions/missing").status_code == 404
    response = client.post("/api/coach/sessions/missing/messages", json={"text": "hi"})
    assert response.status_code == 404
    assert client.get("/api/speech/missing/status").status_code == 404


def test_speech_status_when_disabled(client, profile_payload):
    session_id = start(client, profile_payload)["session_id"]
    body = client.get(f"/api/speech/{session_id}/status").json()
    assert body["enabled"] is False
    assert body["status"] == "idle"

    stopped = client.post(f"/api/speech/{session_id}/stop").json()
    assert stopped["status"] == "idle"


def test_websocket_turns(client, profile_payload):
    session_id = start(client, profile_payload, script="fundamentals")["session_id"]

    with client.websocket_connect(f"/api/coach/ws/{session_id}") as websocket:
        websocket.send_json({"type": "ping"})
        assert websocket.receive_json() == {"type": "pong"}

        websocket.send_json({"type": "message", "text": ""})
        assert websocket.receive_json()["type"] == "ignored"

        websocket.send_json({"type": "message", "text": "sure, let's go"})
        reply = websocket.receive_json()
        assert reply["type"] == "coach"
        assert reply["data"]["question_index"] == 1

        websocket.send_json({"type": "dance"})
        assert websocket.receive_json()["type"] == "error"


def test_websocket_reports_malformed_frames_and_keeps_going(client, profile_payload):
    session_id = start(client, profile_payload, script="fundamentals")["session_id"]

    with client.websocket_connect(f"/api/coach/ws/{session_id}") as websocket:
        websocket.send_json({"type": "message", "text": 5})
        error = websocket.receive_json()
        assert error["type"] == "error"
        assert "string" in error["message"]

        websocket.send_json(["not", "an", "object"])
        assert websocket.receive_json()["type"] == "error"

        websocket.send_json({"type": "message", "text": "yes"})
        reply = websocket.receive_json()
        assert reply["type"] == "coach"
        assert reply["data"]["question_index"] == 1

    state = client.get(f"/api/coach/sessions/{session_id}").json()
    assert [m["sender"] for m in state["transcript"]] == ["coach", "user", "coach"]
