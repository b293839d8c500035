from __future__ import annotations

import unittest
from unittest.mock import patch

import pytest

from fastapi.testclient import TestClient

from eventhub.api import create_app
from eventhub.db import Store
from eventhub.errors import StoreError


class TestStoreFailures(unittest.TestCase):
    """Store failures surface as 500 with an error body."""

    def setUp(self):
        self.client = TestClient(create_app(Store()))

    @patch("eventhub.routes.events.list_events")
    def test_list_events_store_error(self, mock_list):
        mock_list.side_effect = StoreError("disk I/O error")
        response = self.client.get("/events")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json(), {"error": "disk I/O error"})

    @patch("eventhub.routes.events.create_event")
    def test_create_event_store_error(self, mock_create):
        mock_create.side_effect = StoreError("database is locked")
        response = self.client.post("/events", json={"name": "a", "date": "b", "location": "c"})
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["error"], "database is locked")

    @patch("eventhub.routes.events.delete_event")
    def test_delete_event_store_error(self, mock_delete):
        mock_delete.side_effect = StoreError("database is locked")
        response = self.client.delete("/events/1")
        self.assertEqual(response.status_code, 500)

    @patch("eventhub.routes.participants.list_participants")
    def test_list_participants_store_error(self, mock_list):
        mock_list.side_effect = StoreError("no such table: participants")
        response = self.client.get("/events/1/participants")
        self.assertEqual(response.status_code, 500)
        self.assertIn("error", response.json())

    @patch("eventhub.routes.participants.create_participant")
    def test_create_participant_store_error(self, mock_create):
        mock_create.side_effect = StoreError("database is locked")
        response = self.client.post("/events/1/participants", json={"name": "a", "email": "b"})
        self.assertEqual(response.status_code, 500)

    @patch("eventhub.routes.participants.delete_participant")
    def test_delete_participant_store_error(self, mock_delete):
        mock_delete.side_effect = StoreError("database is locked")
        response = self.client.delete("/participants/1")
        self.assertEqual(response.status_code, 500)


def test_connect_failure_becomes_store_error(tmp_path):
    # a directory cannot be opened as a database file
    store = Store(str(tmp_path))
    with pytest.raises(StoreError):
        store.ping()


if __name__ == '__main__':
    unittest.main()
