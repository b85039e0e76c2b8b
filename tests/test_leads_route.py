from leadintake.core.config import settings

LEAD_FORM = {
    "service": "Bathroom",
    "postcode": "SW16 1AB",
    "name": "Jane Smith",
    "phone": "07468 451511",
    "email": "jane@example.co.uk",
}


def test_submit_lead(client, recording_sender):
    response = client.post("/api/leads", data=LEAD_FORM)

    assert response.status_code == 200
    assert response.json() == {"success": True}
    assert response.headers["X-Request-ID"]
    assert recording_sender.messages[0].subject == "New Bathroom Lead - SW16 1AB"


def test_submit_lead_with_photos(client, recording_sender):
    files = {
        "photo-0": ("before.jpg", b"\xff\xd8\xff" * 100, "image/jpeg"),
        "photo-1": ("after.png", b"\x89PNG" * 100, "image/png"),
    }
    response = client.post("/api/leads", data=LEAD_FORM, files=files)

    assert response.status_code == 200
    attachments = recording_sender.messages[0].attachments
    assert [a.filename for a in attachments] == ["before.jpg", "after.png"]


def test_submit_lead_rejects_bad_photo_type(client, recording_sender):
    files = {"photo-0": ("quote.pdf", b"%PDF-1.7", "application/pdf")}
    response = client.post("/api/leads", data=LEAD_FORM, files=files)

    assert response.status_code == 400
    assert response.json()["code"] == "InvalidType"
    assert recording_sender.messages == []


def test_submit_lead_invalid_postcode(client, recording_sender):
    response = client.post("/api/leads", data={**LEAD_FORM, "postcode": "12345"})

    assert response.status_code == 400
    assert response.json() == {"success": False, "error": "Invalid postcode", "code": "InvalidFormat"}
    assert recording_sender.messages == []


def test_submit_lead_dispatch_failure(client, recording_sender):
    recording_sender.error = "HTTP 500: provider down"

    response = client.post("/api/leads", data=LEAD_FORM)

    assert response.status_code == 502
    body = response.json()
    assert body["code"] == "EmailDispatchFailed"
    assert settings.business_phone in body["error"]


def test_sixth_submission_rate_limited(client, recording_sender):
    for _ in range(5):
        assert client.post("/api/leads", data=LEAD_FORM).status_code == 200

    response = client.post("/api/leads", data=LEAD_FORM)

    assert response.status_code == 429
    assert response.headers["Retry-After"] == "3600"
    assert response.json()["code"] == "RateLimited"
    assert len(recording_sender.messages) == 5


def test_forwarded_for_ignored_without_trusted_proxy(client, recording_sender, limiter):
    statuses = [
        client.post("/api/leads", data=LEAD_FORM, headers={"X-Forwarded-For": f"10.0.0.{i}"}).status_code
        for i in range(6)
    ]

    assert statuses == [200] * 5 + [429]
    assert len(recording_sender.messages) == 5
    assert limiter.tracked_keys() == ["testclient"]


def test_forwarded_for_used_behind_trusted_proxy(client, monkeypatch):
    monkeypatch.setattr(settings, "trusted_proxies", "testclient")
    headers = {"X-Forwarded-For": "203.0.113.7"}
    for _ in range(5):
        assert client.post("/api/leads", data=LEAD_FORM, headers=headers).status_code == 200

    assert client.post("/api/leads", data=LEAD_FORM, headers=headers).status_code == 429

    other = client.post("/api/leads", data=LEAD_FORM, headers={"X-Forwarded-For": "198.51.100.1"})
    assert other.status_code == 200


def test_invalid_submissions_count_towards_limit(client):
    for _ in range(5):
        client.post("/api/leads", data={**LEAD_FORM, "email": "bad"})

    response = client.post("/api/leads", data=LEAD_FORM)
    assert response.status_code == 429


def test_oversized_photo_rejected_before_dispatch(client, recording_sender):
    files = {"photo-0": ("huge.jpg", b"\xff" * (5 * 1024 * 1024 + 1), "image/jpeg")}

    response = client.post("/api/leads", data=LEAD_FORM, files=files)

    assert response.status_code == 400
    assert response.json() == {
        "success": False,
        "error": "huge.jpg: File too large. Max 5MB",
        "code": "TooLarge",
    }
    assert recording_sender.messages == []


def test_too_many_photos_rejected(client, recording_sender, monkeypatch):
    monkeypatch.setattr(settings, "max_photo_count", 2)
    files = {f"photo-{i}": (f"room-{i}.jpg", b"\xff\xd8\xff", "image/jpeg") for i in range(3)}

    response = client.post("/api/leads", data=LEAD_FORM, files=files)

    assert response.status_code == 400
    assert response.json()["code"] == "TooManyPhotos"
    assert recording_sender.messages == []


def test_validate_step_too_many_photos(client, monkeypatch):
    monkeypatch.setattr(settings, "max_photo_count", 1)
    photos = [{"filename": f"{i}.jpg", "content_type": "image/jpeg", "size": 10} for i in range(2)]

    body = client.post("/api/leads/steps/3", json={"photos": photos}).json()

    assert body["valid"] is False
    assert body["errors"]["photos"]["code"] == "TooManyPhotos"


def test_request_id_echoed_when_safe(client):
    assert client.get("/api/health", headers={"X-Request-ID": "abc-123"}).headers["X-Request-ID"] == "abc-123"

    oversized = "x" * 100
    replaced = client.get("/api/health", headers={"X-Request-ID": oversized}).headers["X-Request-ID"]
    assert replaced != oversized
    assert len(replaced) == 32


def test_validate_step(client):
    response = client.post("/api/leads/steps/2", json={"postcode": "12345"})

    assert response.status_code == 200
    assert response.json() == {
        "step": 2,
        "valid": False,
        "errors": {"postcode": {"code": "InvalidFormat", "message": "Please enter a valid UK postcode"}},
    }


def test_validate_step_photos(client):
    photos = [
        {"filename": "a.jpg", "content_type": "image/jpeg", "size": 1024},
        {"filename": "b.jpg", "content_type": "image/jpeg", "size": 6 * 1024 * 1024},
    ]
    response = client.post("/api/leads/steps/3", json={"photos": photos})

    body = response.json()
    assert body["valid"] is False
    assert list(body["errors"]) == ["photo-1"]
    assert body["errors"]["photo-1"]["code"] == "TooLarge"


def test_validate_step_contact_valid(client):
    response = client.post(
        "/api/leads/steps/4",
        json={"name": "Jane", "phone": "07468451511", "email": "jane@example.com"},
    )
    assert response.json() == {"step": 4, "valid": True, "errors": {}}


def test_validate_step_out_of_range(client):
    response = client.post("/api/leads/steps/5", json={})

    assert response.status_code == 422
    assert response.json()["code"] == "validation_error"


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["checks"]["email"]["provider"] == "console"
    assert body["checks"]["rate_limit"]["backend"] == "memory"
