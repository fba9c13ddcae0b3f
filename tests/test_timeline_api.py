"""Test timeline endpoints"""

import pytest


@pytest.mark.asyncio
async def test_health(client):
    response = await client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_layout_groups_by_day(client):
    payload = {
        "entries": [
            {"id": "a", "time": "09:00", "end_time": "10:00", "title": "Hair", "event_date": "2025-06-14"},
            {"id": "b", "time": "09:30", "end_time": "10:30", "title": "Makeup", "event_date": "2025-06-14"},
            {"id": "c", "time": "09:30", "end_time": "10:30", "title": "Rehearsal", "event_date": "2025-06-13"},
        ]
    }

    response = await client.post("/api/timeline/layout", json=payload)

    assert response.status_code == 200
    data = response.json()
    assert data["pixels_per_hour"] == 200
    saturday = data["days"]["2025-06-14"]
    assert saturday["a"]["width_percent"] == 50
    assert saturday["b"]["left_percent"] == 50
    assert data["days"]["2025-06-13"]["c"]["width_percent"] == 100


@pytest.mark.asyncio
async def test_layout_uses_requested_scale_and_day(client):
    payload = {
        "entries": [{"id": "a", "time": "01:00", "end_time": "02:00"}],
        "pixels_per_hour": 120,
        "event_date": "2025-06-14",
    }

    response = await client.post("/api/timeline/layout", json=payload)

    assert response.status_code == 200
    layout = response.json()["days"]["2025-06-14"]["a"]
    assert layout["top"] == pytest.approx(61 / 60 * 120)
    assert layout["label"] == "1:00 AM - 2:00 AM"


@pytest.mark.asyncio
async def test_layout_without_dates(client):
    payload = {"entries": [{"id": "a", "time": "10:00", "end_time": "09:00"}]}

    response = await client.post("/api/timeline/layout", json=payload)

    assert response.status_code == 200
    assert response.json()["days"]["undated"]["a"]["height"] == 40


@pytest.mark.asyncio
async def test_layout_empty(client):
    response = await client.post("/api/timeline/layout", json={"entries": []})

    assert response.status_code == 200
    assert response.json()["days"] == {}


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload",
    [
        {"entries": [], "pixels_per_hour": 0},
        {"entries": [], "pixels_per_hour": -50},
        {"entries": [{"id": "a", "time": "25:00"}]},
        {"entries": [{"id": "a", "time": "9am"}]},
    ],
)
async def test_layout_rejects_invalid_input(client, payload):
    response = await client.post("/api/timeline/layout", json=payload)

    assert response.status_code == 422


@pytest.mark.asyncio
async def test_import_text_schedule(client):
    content = b"9:00 AM - Hair & makeup\n2:00 PM - 2:30 PM Ceremony\nDress code: formal\n"

    response = await client.post(
        "/api/timeline/import",
        files={"file": ("schedule.txt", content, "text/plain")},
        data={"event_date": "2025-06-14"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["filename"] == "schedule.txt"
    assert data["count"] == 2
    assert data["entries"][0] == {
        "title": "Hair & makeup",
        "time": "09:00",
        "end_time": "09:30",
        "description": "",
        "location": "",
        "color": "#8B5CF6",
        "event_date": "2025-06-14",
    }
    assert data["entries"][1]["end_time"] == "14:30"


@pytest.mark.asyncio
async def test_import_rejects_legacy_word(client):
    response = await client.post(
        "/api/timeline/import",
        files={"file": ("old.doc", b"\xd0\xcf\x11\xe0", "application/msword")},
    )

    assert response.status_code == 400
    assert ".docx" in response.json()["detail"]


@pytest.mark.asyncio
async def test_import_without_timeline_lines(client):
    response = await client.post(
        "/api/timeline/import",
        files={"file": ("notes.txt", b"Bring the rings\n", "text/plain")},
    )

    assert response.status_code == 422
    assert response.json()["detail"].startswith("No timeline events found")


@pytest.mark.asyncio
async def test_import_too_large(client):
    content = b"x" * (1024 * 1024 + 1)

    response = await client.post(
        "/api/timeline/import",
        files={"file": ("huge.txt", content, "text/plain")},
    )

    assert response.status_code == 413


@pytest.mark.asyncio
async def test_event_days(client):
    response = await client.get("/api/timeline/days", params={"start_date": "2025-06-13", "end_date": "2025-06-15"})

    assert response.status_code == 200
    assert response.json() == {"dates": ["2025-06-13", "2025-06-14", "2025-06-15"]}


@pytest.mark.asyncio
async def test_single_day_event(client):
    response = await client.get("/api/timeline/days", params={"start_date": "2025-06-14"})

    assert response.json() == {"dates": ["2025-06-14"]}
