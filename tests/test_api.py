from datetime import datetime, timedelta

from shared.db import utcnow


def _parse(value):
    # pydantic writes UTC as a trailing "Z"
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


async def test_healthcheck(client):
    response = await client.get("/healthcheck")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert body["timestamp"]


async def test_home_page_on_empty_store(client):
    response = await client.get("/home")

    assert response.status_code == 200
    body = response.json()
    assert body["latestNews"] == []
    assert body["upcomingEvents"] == []
    assert body["quickLinks"] == []
    assert body["contactInfo"]["school_name"] == "Edmonton Excellence Academy"
    assert body["contactInfo"]["office_hours"] is not None


async def test_create_and_update_news_over_http(client):
    created = await client.post("/news/", json={
        "title": "Welcome Back",
        "content": "School starts Monday.",
        "summary": "Back to school",
        "author": "Principal",
    })
    assert created.status_code == 200
    article = created.json()
    assert article["created_at"] == article["updated_at"]

    updated = await client.patch(f"/news/{article['id']}", json={"summary": None})

    assert updated.status_code == 200
    body = updated.json()
    assert body["summary"] is None
    assert body["title"] == "Welcome Back"
    assert body["created_at"] == article["created_at"]
    assert _parse(body["updated_at"]) > _parse(article["updated_at"])


async def test_create_news_with_empty_title_is_rejected(client):
    response = await client.post("/news/", json={
        "title": "", "content": "Body", "author": "Someone"
    })
    assert response.status_code == 422


async def test_latest_news_limit_must_be_positive(client):
    response = await client.get("/news/latest", params={"limit": 0})
    assert response.status_code == 422


async def test_update_missing_article_returns_404(client):
    response = await client.patch("/news/404", json={"title": "Ghost"})

    assert response.status_code == 404
    assert response.json() == {"detail": "News article with id 404 not found"}


async def test_upcoming_events_over_http(client):
    soon = utcnow() + timedelta(days=2)
    later = utcnow() + timedelta(days=5)
    for title, when in [("Later", later), ("Soon", soon)]:
        response = await client.post("/events/", json={
            "title": title,
            "description": "Something happening",
            "event_date": when.isoformat(),
            "event_time": None,
            "location": None,
        })
        assert response.status_code == 200

    response = await client.get("/events/upcoming")

    assert [e["title"] for e in response.json()] == ["Soon", "Later"]


async def test_quick_links_over_http(client):
    await client.post("/quick-links/", json={"title": "B", "url": "https://example.com/b", "display_order": 2})
    await client.post("/quick-links/", json={"title": "A", "url": "https://example.com/a", "display_order": 1})
    hidden = await client.post("/quick-links/", json={"title": "C", "url": "https://example.com/c"})
    await client.patch(f"/quick-links/{hidden.json()['id']}", json={"is_active": False})

    response = await client.get("/quick-links/")

    assert [l["title"] for l in response.json()] == ["A", "B"]


async def test_quick_link_bad_url_is_rejected(client):
    response = await client.post("/quick-links/", json={"title": "Bad", "url": "nope"})
    assert response.status_code == 422


async def test_contact_info_is_null_until_created(client):
    empty = await client.get("/contact-info/")
    assert empty.status_code == 200
    assert empty.json() is None

    created = await client.post("/contact-info/", json={
        "school_name": "Hilltop High",
        "address": "1 Hill Road",
        "phone": "555-0100",
        "email": "info@hilltop.example.com",
    })
    assert created.status_code == 200

    current = await client.get("/contact-info/")
    assert current.json()["school_name"] == "Hilltop High"

    home = await client.get("/home")
    assert home.json()["contactInfo"]["id"] == created.json()["id"]


async def test_update_contact_info_missing_returns_404(client):
    response = await client.patch("/contact-info/9", json={"phone": "555"})
    assert response.status_code == 404


async def test_oversized_limits_are_rejected(client):
    news = await client.get("/news/latest", params={"limit": 10**20})
    events = await client.get("/events/upcoming", params={"limit": 10**20})

    assert news.status_code == 422
    assert events.status_code == 422


async def test_store_failure_returns_503(engine, client):
    async with engine.begin() as conn:
        await conn.exec_driver_sql("DROP TABLE news_articles")

    response = await client.post("/news/", json={
        "title": "Lost", "content": "Body", "author": "Office"
    })

    assert response.status_code == 503
    assert response.json() == {"detail": "News article creation failed"}


async def test_timestamps_carry_utc_offset(client):
    created = await client.post("/quick-links/", json={"title": "A", "url": "https://example.com/a"})
    body = created.json()

    assert _parse(body["created_at"]).utcoffset() == timedelta(0)
    assert _parse(body["updated_at"]).utcoffset() == timedelta(0)
