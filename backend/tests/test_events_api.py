"""
Endpoint tests for /api/v1/events.

Run from the project root:
    cd backend
    pytest tests/test_events_api.py -v
"""

from datetime import datetime, timedelta

from tests.conftest import NOW


def _titles(response):
    return [e["title"] for e in response.json()["events"]]


# ---------------------------------------------------------------------------
# GET /events — filters
# ---------------------------------------------------------------------------

class TestListEvents:
    def test_default_lists_published_upcoming_by_start_date(self, api_client, add_event):
        add_event(title="Later", start_date=NOW + timedelta(days=5))
        add_event(title="Sooner", start_date=NOW + timedelta(days=1))
        add_event(title="Finished", start_date=NOW - timedelta(days=3))
        add_event(title="Hidden draft", published_status="draft")

        response = api_client.get("/api/v1/events")

        assert response.status_code == 200
        assert _titles(response) == ["Sooner", "Later"]
        assert response.json()["pagination"] == {"total": 2, "page": 1, "limit": 20, "pages": 1}

    def test_event_still_running_counts_as_upcoming(self, api_client, add_event):
        add_event(title="Ongoing", start_date=NOW - timedelta(days=1), end_date=NOW + timedelta(hours=1))

        assert _titles(api_client.get("/api/v1/events")) == ["Ongoing"]

    def test_show_past_includes_finished_events(self, api_client, add_event):
        add_event(title="Finished", start_date=NOW - timedelta(days=3))
        add_event(title="Upcoming")

        response = api_client.get("/api/v1/events", params={"showPast": "true"})

        assert _titles(response) == ["Finished", "Upcoming"]

    def test_featured_only(self, api_client, add_event):
        add_event(title="Plain")
        add_event(title="Star", featured=True)

        response = api_client.get("/api/v1/events", params={"featured": "true"})

        assert _titles(response) == ["Star"]

    def test_featured_false_does_not_filter(self, api_client, add_event):
        add_event(title="Plain")
        add_event(title="Star", featured=True)

        response = api_client.get("/api/v1/events", params={"featured": "false"})

        assert len(_titles(response)) == 2

    def test_category_filter(self, api_client, add_event):
        add_event(title="Gig", category="concert")
        add_event(title="Match", category="sport")

        response = api_client.get("/api/v1/events", params={"category": "sport"})

        assert _titles(response) == ["Match"]

    def test_empty_category_means_all(self, api_client, add_event):
        add_event(category="concert")
        add_event(category="sport")

        response = api_client.get("/api/v1/events", params={"category": ""})

        assert response.json()["pagination"]["total"] == 2

    def test_sort_descending_title(self, api_client, add_event):
        for title in ("Bravo", "Alpha", "Charlie"):
            add_event(title=title)

        response = api_client.get("/api/v1/events", params={"sort": "-title"})

        assert _titles(response) == ["Charlie", "Bravo", "Alpha"]

    def test_unknown_sort_key_is_400(self, api_client):
        response = api_client.get("/api/v1/events", params={"sort": "price"})

        assert response.status_code == 400
        body = response.json()
        assert body["status_code"] == 400
        assert "price" in body["error"]
        assert body["request_id"] == response.headers["X-Request-ID"]

    def test_unknown_date_range_is_rejected(self, api_client):
        response = api_client.get("/api/v1/events", params={"dateRange": "someday"})

        assert response.status_code == 422

    def test_response_uses_camel_case_fields(self, api_client, add_event):
        add_event(
            title="Workshop",
            all_day=True,
            location={"type": "venue", "venueName": "Library", "address": {"city": "Portside"}},
            ticket_info={"isFree": False, "price": 15, "currency": "EUR"},
            images=[{"url": "https://img.example.org/a.jpg", "isMain": True}],
        )

        event = api_client.get("/api/v1/events").json()["events"][0]

        assert {"id", "title", "shortDescription", "startDate", "endDate", "allDay", "ticketInfo"} <= event.keys()
        assert event["allDay"] is True
        assert event["location"]["venueName"] == "Library"
        assert event["location"]["address"]["city"] == "Portside"
        assert event["ticketInfo"]["price"] == 15
        assert event["ticketInfo"]["currency"] == "EUR"
        assert event["images"][0]["isMain"] is True


# ---------------------------------------------------------------------------
# GET /events — named and custom date ranges
# ---------------------------------------------------------------------------

class TestDateRangeFilter:
    def _seed(self, add_event):
        # NOW is Wednesday 2026-10-21 12:00
        add_event(title="Wed evening", start_date=datetime(2026, 10, 21, 19))
        add_event(title="Thursday", start_date=datetime(2026, 10, 22, 10))
        add_event(title="Saturday", start_date=datetime(2026, 10, 24, 15))
        add_event(title="Next Tuesday", start_date=datetime(2026, 10, 27, 9))
        add_event(title="November", start_date=datetime(2026, 11, 12, 9))

    def _titles_for(self, api_client, **params):
        return _titles(api_client.get("/api/v1/events", params=params))

    def test_today(self, api_client, add_event):
        self._seed(add_event)
        assert self._titles_for(api_client, dateRange="today") == ["Wed evening"]

    def test_tomorrow(self, api_client, add_event):
        self._seed(add_event)
        assert self._titles_for(api_client, dateRange="tomorrow") == ["Thursday"]

    def test_this_week(self, api_client, add_event):
        self._seed(add_event)
        assert self._titles_for(api_client, dateRange="thisWeek") == ["Wed evening", "Thursday", "Saturday"]

    def test_this_weekend(self, api_client, add_event):
        self._seed(add_event)
        assert self._titles_for(api_client, dateRange="thisWeekend") == ["Saturday"]

    def test_next_week(self, api_client, add_event):
        self._seed(add_event)
        assert self._titles_for(api_client, dateRange="nextWeek") == ["Next Tuesday"]

    def test_this_month(self, api_client, add_event):
        self._seed(add_event)
        assert "November" not in self._titles_for(api_client, dateRange="thisMonth")

    def test_custom_range_end_date_is_inclusive(self, api_client, add_event):
        self._seed(add_event)
        titles = self._titles_for(api_client, dateRange="custom", startDate="2026-10-24", endDate="2026-10-27")
        assert titles == ["Saturday", "Next Tuesday"]

    def test_custom_without_dates_applies_no_window(self, api_client, add_event):
        self._seed(add_event)
        assert len(self._titles_for(api_client, dateRange="custom")) == 5

    def test_custom_dates_ignored_for_named_range(self, api_client, add_event):
        self._seed(add_event)
        titles = self._titles_for(api_client, dateRange="tomorrow", startDate="2026-11-01", endDate="2026-11-30")
        assert titles == ["Thursday"]

    def test_custom_range_reversed_is_400(self, api_client):
        response = api_client.get(
            "/api/v1/events",
            params={"dateRange": "custom", "startDate": "2026-11-10", "endDate": "2026-11-01"},
        )
        assert response.status_code == 400

    def test_multi_day_event_overlapping_window_matches(self, api_client, add_event):
        add_event(
            title="Long festival",
            start_date=datetime(2026, 10, 20, 10),
            end_date=datetime(2026, 10, 25, 22),
        )
        assert self._titles_for(api_client, dateRange="thisWeekend") == ["Long festival"]


# ---------------------------------------------------------------------------
# GET /events — pagination
# ---------------------------------------------------------------------------

class TestPagination:
    def test_last_partial_page(self, api_client, add_event):
        for i in range(25):
            add_event(start_date=NOW + timedelta(hours=i + 1))

        response = api_client.get("/api/v1/events", params={"page": 3, "limit": 10})

        assert len(response.json()["events"]) == 5
        assert response.json()["pagination"] == {"total": 25, "page": 3, "limit": 10, "pages": 3}

    def test_pages_do_not_overlap(self, api_client, add_event):
        for i in range(6):
            add_event(start_date=NOW + timedelta(hours=i + 1))

        first = {e["id"] for e in api_client.get("/api/v1/events", params={"limit": 3}).json()["events"]}
        second = {
            e["id"] for e in api_client.get("/api/v1/events", params={"limit": 3, "page": 2}).json()["events"]
        }

        assert len(first | second) == 6

    def test_empty_catalog(self, api_client):
        body = api_client.get("/api/v1/events").json()

        assert body["events"] == []
        assert body["pagination"]["total"] == 0
        assert body["pagination"]["pages"] == 0

    def test_page_zero_rejected(self, api_client):
        assert api_client.get("/api/v1/events", params={"page": 0}).status_code == 422

    def test_limit_above_max_rejected(self, api_client):
        assert api_client.get("/api/v1/events", params={"limit": 101}).status_code == 422


# ---------------------------------------------------------------------------
# Other read routes
# ---------------------------------------------------------------------------

class TestCategoryRoute:
    def test_lists_upcoming_in_category(self, api_client, add_event):
        add_event(title="Gig", category="concert")
        add_event(title="Old gig", category="concert", start_date=NOW - timedelta(days=2))
        add_event(title="Match", category="sport")

        response = api_client.get("/api/v1/events/category/concert")

        assert _titles(response) == ["Gig"]
        assert response.json()["pagination"]["total"] == 1

    def test_invalid_category_is_400(self, api_client):
        response = api_client.get("/api/v1/events/category/rave")

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid category"


class TestUpcomingRoute:
    def test_only_events_starting_within_days(self, api_client, add_event):
        add_event(title="In three days", start_date=NOW + timedelta(days=3))
        add_event(title="In ten days", start_date=NOW + timedelta(days=10))

        assert [e["title"] for e in api_client.get("/api/v1/events/upcoming").json()] == ["In three days"]
        assert len(api_client.get("/api/v1/events/upcoming", params={"days": 14}).json()) == 2

    def test_capped_at_twenty(self, api_client, add_event):
        for i in range(25):
            add_event(start_date=NOW + timedelta(hours=i + 1))

        assert len(api_client.get("/api/v1/events/upcoming").json()) == 20


class TestDateRangeRoute:
    def test_missing_dates_is_400(self, api_client):
        response = api_client.get("/api/v1/events/date-range", params={"startDate": "2026-10-01"})

        assert response.status_code == 400
        assert response.json()["error"] == "Start date and end date are required"

    def test_bad_date_is_400(self, api_client):
        response = api_client.get(
            "/api/v1/events/date-range", params={"startDate": "yesterday", "endDate": "2026-10-30"}
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid date format"

    def test_includes_past_events_overlapping_range(self, api_client, add_event):
        add_event(title="Last week", start_date=datetime(2026, 10, 14, 18))
        add_event(title="Outside", start_date=datetime(2026, 10, 1, 18))

        response = api_client.get(
            "/api/v1/events/date-range", params={"startDate": "2026-10-10", "endDate": "2026-10-14"}
        )

        assert [e["title"] for e in response.json()] == ["Last week"]


class TestFeaturedRoute:
    def test_current_featured_only(self, api_client, add_event):
        add_event(title="Star", featured=True)
        add_event(title="Faded star", featured=True, start_date=NOW - timedelta(days=5))
        add_event(title="Plain")

        assert [e["title"] for e in api_client.get("/api/v1/events/featured").json()] == ["Star"]


class TestEventDetail:
    def test_returns_detail_fields(self, api_client, add_event):
        event = add_event(title="Open Day", slug="open-day", description="Doors open", tags=["family"])

        response = api_client.get(f"/api/v1/events/{event.id}")

        assert response.status_code == 200
        body = response.json()
        assert body["slug"] == "open-day"
        assert body["description"] == "Doors open"
        assert body["tags"] == ["family"]

    def test_not_found(self, api_client):
        response = api_client.get("/api/v1/events/does-not-exist")

        assert response.status_code == 404
        assert response.json()["status_code"] == 404

    def test_draft_is_hidden(self, api_client, add_event):
        event = add_event(published_status="draft")

        assert api_client.get(f"/api/v1/events/{event.id}").status_code == 404
