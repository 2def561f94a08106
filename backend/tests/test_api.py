import unittest
import uuid

from fastapi.testclient import TestClient

from dbco_backend.api import create_app
from dbco_backend.metrics import reset_metrics


class APITestCase(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.client = TestClient(create_app())

    def setUp(self) -> None:
        reset_metrics()

    def test_health_endpoint(self) -> None:
        response = self.client.get("/healthz")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "ok")

    def test_classification_needs_assessment(self) -> None:
        response = self.client.post("/v1/classification", json={"sameHousehold": False})
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual(payload["result"], {"type": "needsAssessment", "risk": "distance"})
        self.assertIsNone(payload["category"])
        self.assertEqual(payload["visibleRisks"], ["sameHousehold", "distance"])

    def test_classification_success(self) -> None:
        response = self.client.post(
            "/v1/classification",
            json={"sameHousehold": False, "distance": "yesLessThan15min", "physicalContact": True},
        )
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual(payload["result"], {"type": "success", "category": "2b"})
        self.assertEqual(payload["category"], "2b")
        self.assertEqual(payload["visibleRisks"], ["sameHousehold", "distance", "physicalContact"])

    def test_classification_of_empty_answers(self) -> None:
        response = self.client.post("/v1/classification", json={})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["result"], {"type": "needsAssessment", "risk": "sameHousehold"})

    def test_classification_rejects_unknown_distance(self) -> None:
        response = self.client.post("/v1/classification", json={"sameHousehold": False, "distance": "far"})
        self.assertEqual(response.status_code, 422)

    def test_category_risks(self) -> None:
        response = self.client.get("/v1/classification/categories/2a/risks")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(
            response.json(),
            {"sameHousehold": False, "distance": "yesMoreThan15min", "physicalContact": None, "sameRoom": None},
        )

    def test_category_risks_rejects_unknown_category(self) -> None:
        response = self.client.get("/v1/classification/categories/4/risks")
        self.assertEqual(response.status_code, 422)

    def test_sort_tasks(self) -> None:
        tasks = [
            {"uuid": str(uuid.uuid4()), "label": "Bob", "category": "2a", "dateOfLastExposure": "2020-10-10"},
            {"uuid": str(uuid.uuid4()), "label": "Anna", "category": "1", "dateOfLastExposure": "2020-10-01"},
            {"uuid": str(uuid.uuid4()), "label": "Carl", "category": "other", "dateOfLastExposure": "2020-10-12"},
        ]
        response = self.client.post("/v1/tasks/sort", json={"tasks": tasks})
        self.assertEqual(response.status_code, 200)
        payload = response.json()["tasks"]
        self.assertEqual([task["label"] for task in payload], ["Anna", "Carl", "Bob"])
        self.assertIsNone(payload[1]["category"])

    def test_sort_tasks_rejects_malformed_date(self) -> None:
        tasks = [{"uuid": str(uuid.uuid4()), "label": "Bob", "dateOfLastExposure": "10-10-2020"}]
        response = self.client.post("/v1/tasks/sort", json={"tasks": tasks})
        self.assertEqual(response.status_code, 422)

    def test_classification_metrics_endpoint(self) -> None:
        self.client.post("/v1/classification", json={"sameHousehold": True})
        self.client.post("/v1/classification", json={})
        response = self.client.get("/metrics/classification")
        self.assertEqual(response.status_code, 200)
        payload = response.json()
        self.assertEqual(payload["outcomes"]["category:1"], 1)
        self.assertEqual(payload["outcomes"]["needs:sameHousehold"], 1)
        self.assertEqual(payload["latency"]["classification"]["count"], 2)
        self.assertEqual(payload["totals"], {"classified": 1, "needsAssessment": 1})


if __name__ == "__main__":
    unittest.main()
