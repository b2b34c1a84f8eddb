"""Integration tests for court status endpoints."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from unittest import mock

from django.contrib.auth import get_user_model
from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.bookings.models import Booking
from apps.court_status.models import CourtClosure
from apps.court_status.repositories import DjangoClosureRepository

User = get_user_model()

DAY = date(2030, 5, 10)


class CourtStatusAPITests(APITestCase):
    def setUp(self) -> None:
        self.admin = User.objects.create_user(username="admin", password="AdminPass123", is_staff=True)
        self.client.force_authenticate(self.admin)

    def _close(self, **payload):
        body = {"date": DAY.isoformat(), **payload}
        return self.client.post(reverse("court-status-close"), body, format="json")

    def test_endpoints_require_an_admin(self) -> None:
        self.client.force_authenticate(None)

        response = self.client.get(reverse("court-status-list"), {"date": DAY.isoformat()})

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertFalse(response.data["success"])

    def test_close_single_court(self) -> None:
        response = self._close(startTime="09:00", courtId="Court 1")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["message"], "Court 1 closed successfully")
        self.assertEqual(response.data["data"]["reason"], "Court closed by admin")
        self.assertEqual(response.data["data"]["closedBy"], "admin")
        self.assertEqual(CourtClosure.objects.count(), 1)

    def test_close_both_courts(self) -> None:
        response = self._close(startTime="09:00", courtId="Both", status="Maintenance")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["message"], "Both courts closed successfully")
        self.assertEqual(len(response.data["data"]), 2)
        self.assertEqual(
            set(CourtClosure.objects.values_list("court", flat=True)),
            {"Court 1", "Court 2"},
        )

    def test_closing_twice_is_rejected(self) -> None:
        self._close(startTime="09:00", courtId="Court 1")

        response = self._close(startTime="09:00", courtId="Court 1")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Court 1 is already closed at 09:00")
        self.assertEqual(CourtClosure.objects.count(), 1)

    def test_closing_a_booked_slot_is_rejected(self) -> None:
        Booking.objects.create(
            date=DAY,
            start_time="09:00",
            court="Court 2",
            customer_name="Nimal Perera",
            mobile_number="0771234567",
            price=Decimal("1500"),
        )

        response = self._close(startTime="09:00", courtId="Both")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["message"], "Court 2 is already booked at 09:00")
        self.assertFalse(CourtClosure.objects.exists())

    def test_close_requires_a_start_time_unless_full_day(self) -> None:
        response = self._close(courtId="Court 1")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("startTime", response.data["errors"])

    def test_close_day_twice_creates_no_duplicates(self) -> None:
        url = reverse("court-status-close-day")
        body = {"date": DAY.isoformat(), "courtId": "Both"}

        first = self.client.post(url, body, format="json")
        second = self.client.post(url, body, format="json")

        self.assertEqual(first.status_code, status.HTTP_201_CREATED, first.data)
        self.assertEqual(first.data["count"], 34)
        self.assertEqual(first.data["message"], "Both courts closed for entire day")
        self.assertEqual(second.status_code, status.HTTP_201_CREATED, second.data)
        self.assertEqual(second.data["count"], 0)
        self.assertEqual(second.data["alreadyClosed"], 34)
        self.assertEqual(CourtClosure.objects.count(), 34)

    def test_close_full_day_flag(self) -> None:
        response = self._close(courtId="Court 2", closeFullDay=True, reason="Tournament")

        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        self.assertEqual(response.data["count"], 17)
        self.assertEqual(set(CourtClosure.objects.values_list("reason", flat=True)), {"Tournament"})

    def test_list_and_check(self) -> None:
        self._close(startTime="09:00", courtId="Court 1")
        self._close(startTime="10:00", courtId="Court 2", status="Maintenance")

        listed = self.client.get(reverse("court-status-list"), {"date": DAY.isoformat()})
        filtered = self.client.get(
            reverse("court-status-list"),
            {"date": DAY.isoformat(), "status": "Maintenance"},
        )
        closed = self.client.get(
            reverse("court-status-check"),
            {"date": DAY.isoformat(), "startTime": "09:00", "courtId": "Court 1"},
        )
        open_slot = self.client.get(
            reverse("court-status-check"),
            {"date": DAY.isoformat(), "startTime": "09:00", "courtId": "Court 2"},
        )

        self.assertEqual(listed.data["count"], 2)
        self.assertEqual(listed.data["data"][0]["endTime"], "10:00")
        self.assertEqual(filtered.data["count"], 1)
        self.assertTrue(closed.data["isClosed"])
        self.assertEqual(closed.data["data"]["courtId"], "Court 1")
        self.assertFalse(open_slot.data["isClosed"])
        self.assertIsNone(open_slot.data["data"])

    def test_list_reads_through_the_closure_repository(self) -> None:
        self._close(startTime="09:00", courtId="Court 1")
        CourtClosure.objects.create(date=DAY, start_time="11:00", court="Both")
        original = DjangoClosureRepository.queryset

        with mock.patch.object(
            DjangoClosureRepository, "queryset", autospec=True, side_effect=original
        ) as queryset:
            response = self.client.get(
                reverse("court-status-list"),
                {"date": DAY.isoformat(), "courtId": "Court 1"},
            )

        queryset.assert_called_once()
        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(
            [(row["startTime"], row["courtId"]) for row in response.data["data"]],
            [("09:00", "Court 1"), ("11:00", "Both")],
        )

    def test_list_requires_date(self) -> None:
        response = self.client.get(reverse("court-status-list"))

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("Date parameter is required", response.data["message"])

    def test_reopen_by_filter(self) -> None:
        self.client.post(reverse("court-status-close-day"), {"date": DAY.isoformat(), "courtId": "Both"}, format="json")
        url = reverse("court-status-reopen")

        one_hour = self.client.post(url, {"date": DAY.isoformat(), "startTime": "09:00"}, format="json")
        whole_court = self.client.post(
            url,
            {"date": DAY.isoformat(), "startTime": "10:00", "courtId": "Court 1", "reopenFullDay": True},
            format="json",
        )

        self.assertEqual(one_hour.status_code, status.HTTP_200_OK, one_hour.data)
        self.assertEqual(one_hour.data["deletedCount"], 2)
        self.assertEqual(whole_court.data["deletedCount"], 16)
        self.assertEqual(CourtClosure.objects.count(), 16)

    def test_single_court_reopen_keeps_all_courts_row(self) -> None:
        CourtClosure.objects.create(date=DAY, start_time="09:00", court="Both")
        url = reverse("court-status-reopen")

        single = self.client.post(url, {"date": DAY.isoformat(), "startTime": "09:00", "courtId": "Court 1"}, format="json")

        self.assertEqual(single.status_code, status.HTTP_200_OK, single.data)
        self.assertEqual(single.data["deletedCount"], 0)
        self.assertTrue(CourtClosure.objects.filter(court="Both").exists())

        both = self.client.post(url, {"date": DAY.isoformat(), "startTime": "09:00", "courtId": "Both"}, format="json")

        self.assertEqual(both.data["deletedCount"], 1)
        self.assertFalse(CourtClosure.objects.exists())

    def test_reopen_by_id(self) -> None:
        self._close(startTime="09:00", courtId="Court 1")
        closure = CourtClosure.objects.get()

        response = self.client.delete(reverse("court-status-detail", args=[closure.pk]))
        missing = self.client.delete(reverse("court-status-detail", args=[closure.pk]))

        self.assertEqual(response.status_code, status.HTTP_200_OK, response.data)
        self.assertEqual(response.data["message"], "Court 1 reopened successfully")
        self.assertFalse(CourtClosure.objects.exists())
        self.assertEqual(missing.status_code, status.HTTP_404_NOT_FOUND)
