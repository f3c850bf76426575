# tests/test_api_activities.py
from __future__ import annotations

from conftest import register

ACT = "/api/v1/activities"


def _run(distance=5, start="2025-03-01T07:00:00Z", end="2025-03-01T08:00:00Z", **extra):
    body = {"type": "running", "startTime": start, "endTime": end, **extra}
    if distance is not None:
        body["distance"] = distance
    return body


# ── profile ──────────────────────────────────────────────────────────
def test_profile_update_and_fetch(client, auth_headers):
    r = client.put(
        "/api/v1/profile",
        json={"gender": "female", "age": 31, "height": 168, "weight": 61.5},
        headers=auth_headers,
    )
    assert r.status_code == 200
    assert r.json()["message"] == "Profile updated successfully"

    # partial update keeps the rest
    client.put("/api/v1/profile", json={"age": 32}, headers=auth_headers)
    prof = client.get("/api/v1/profile", headers=auth_headers).json()["user"]["profile"]
    assert prof == {"gender": "female", "age": 32, "height": 168.0, "weight": 61.5}


def test_profile_ranges(client, auth_headers):
    for body in ({"age": 0}, {"height": 301}, {"weight": 19}, {"gender": "robot"}):
        r = client.put("/api/v1/profile", json=body, headers=auth_headers)
        assert r.status_code == 422, body


# ── create ───────────────────────────────────────────────────────────
def test_create_running_activity(client, weighed_headers):
    r = client.post(ACT, json=_run(notes="easy"), headers=weighed_headers)
    assert r.status_code == 201, r.text
    act = r.json()["activity"]
    assert act["duration"] == 60
    assert act["met_value"] == 8.0
    assert act["calories_burned"] == 588.0
    assert act["notes"] == "easy"


def test_running_without_distance_uses_sitting_met(client, weighed_headers):
    r = client.post(ACT, json=_run(distance=None), headers=weighed_headers)
    assert r.status_code == 201
    assert r.json()["activity"]["met_value"] == 1.3


def test_end_before_start(client, weighed_headers):
    r = client.post(
        ACT,
        json=_run(start="2025-03-01T08:00:00Z", end="2025-03-01T08:00:00Z"),
        headers=weighed_headers,
    )
    assert r.status_code == 400
    assert r.json()["detail"] == "End time must be after start time"


def test_weight_required(client, auth_headers):
    r = client.post(ACT, json=_run(), headers=auth_headers)
    assert r.status_code == 400
    assert "weight" in r.json()["detail"]


def test_unknown_type_rejected(client, weighed_headers):
    body = _run()
    body["type"] = "swimming"
    assert client.post(ACT, json=body, headers=weighed_headers).status_code == 422


# ── list / delete ────────────────────────────────────────────────────
def test_list_filters_and_orders(client, weighed_headers):
    for day in ("01", "05", "09"):
        client.post(
            ACT,
            json=_run(start=f"2025-03-{day}T07:00:00Z", end=f"2025-03-{day}T07:30:00Z"),
            headers=weighed_headers,
        )

    acts = client.get(ACT, headers=weighed_headers).json()["activities"]
    assert [a["start_time"][:10] for a in acts] == ["2025-03-09", "2025-03-05", "2025-03-01"]

    r = client.get(
        ACT,
        params={"startDate": "2025-03-02T00:00:00", "endDate": "2025-03-06T00:00:00"},
        headers=weighed_headers,
    )
    assert [a["start_time"][:10] for a in r.json()["activities"]] == ["2025-03-05"]


def test_users_only_see_their_own(client, weighed_headers):
    client.post(ACT, json=_run(), headers=weighed_headers)
    other = {"Authorization": f"Bearer {register(client, email='other@example.com')['token']}"}
    assert client.get(ACT, headers=other).json()["activities"] == []


def test_delete(client, weighed_headers):
    act_id = client.post(ACT, json=_run(), headers=weighed_headers).json()["activity"]["id"]

    other = {"Authorization": f"Bearer {register(client, email='other@example.com')['token']}"}
    assert client.delete(f"{ACT}/{act_id}", headers=other).status_code == 404

    assert client.delete(f"{ACT}/{act_id}", headers=weighed_headers).status_code == 204
    assert client.get(ACT, headers=weighed_headers).json()["activities"] == []


# ── stats ────────────────────────────────────────────────────────────
def test_stats(client, weighed_headers):
    client.post(ACT, json=_run(distance=5), headers=weighed_headers)
    client.post(
        ACT,
        json={"type": "walking", "startTime": "2025-03-01T18:00:00Z", "endTime": "2025-03-01T19:00:00Z"},
        headers=weighed_headers,
    )
    client.post(
        ACT,
        json=_run(distance=13, start="2025-04-02T07:00:00Z", end="2025-04-02T08:00:00Z"),
        headers=weighed_headers,
    )

    day = client.get("/api/v1/stats", headers=weighed_headers).json()
    assert [s["period"] for s in day["stats"]] == ["2025-03-01", "2025-04-02"]
    assert day["stats"][0]["activity_count"] == 2
    assert day["stats"][0]["total_calories"] == 588.0 + 257.25

    month = client.get("/api/v1/stats", params={"groupBy": "month"}, headers=weighed_headers).json()
    assert [s["period"] for s in month["stats"]] == ["2025-03", "2025-04"]

    by_type = {b["type"]: b["count"] for b in month["activity_breakdown"]}
    assert by_type == {"running": 2, "walking": 1}

    r = client.get("/api/v1/stats", params={"startDate": "2025-04-01T00:00:00"}, headers=weighed_headers)
    assert len(r.json()["stats"]) == 1


def test_zero_distance_counts_as_missing(client, weighed_headers):
    r = client.post(ACT, json=_run(distance=0), headers=weighed_headers)
    assert r.status_code == 201, r.text
    act = r.json()["activity"]
    assert act["distance"] is None
    assert act["met_value"] == 1.3


def test_negative_distance_rejected(client, weighed_headers):
    assert client.post(ACT, json=_run(distance=-1), headers=weighed_headers).status_code == 422


def test_stats_unknown_group_by_is_month(client, weighed_headers):
    client.post(ACT, json=_run(), headers=weighed_headers)
    r = client.get("/api/v1/stats", params={"groupBy": "week"}, headers=weighed_headers)
    assert r.status_code == 200
    assert [s["period"] for s in r.json()["stats"]] == ["2025-03"]
