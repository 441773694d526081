"""
Tests for the /Regions endpoints and the reference delete policy.
"""

import json
import uuid


class TestRegionCrud:
    """Test list, get, add, update and delete"""

    def test_add_region(self, client, otago_payload):
        response = client.post("/Regions", json=otago_payload)

        assert response.status_code == 201
        data = response.json()
        assert data["Name"] == "Otago"
        assert data["Code"] == "OTA"
        assert data["Lat"] == -45.0
        assert data["Long"] == 170.5
        assert data["Image"] is None
        assert response.headers["Location"].endswith(f"/Regions/{data['Id']}")

    def test_get_region(self, client, region):
        response = client.get(f"/Regions/{region['Id']}")
        assert response.status_code == 200
        assert response.json() == region

    def test_list_regions(self, client, region):
        assert client.get("/Regions").json() == [region]

    def test_get_unknown_region(self, client):
        assert client.get(f"/Regions/{uuid.uuid4()}").status_code == 404

    def test_update_replaces_image(self, client, otago_payload):
        created = client.post("/Regions", json={**otago_payload, "Image": "otago.png"}).json()

        response = client.put(f"/Regions/{created['Id']}", json=otago_payload)

        assert response.status_code == 200
        assert response.json()["Image"] is None

    def test_update_unknown_region(self, client, otago_payload):
        assert client.put(f"/Regions/{uuid.uuid4()}", json=otago_payload).status_code == 404

    def test_blank_name_and_code(self, client):
        response = client.post(
            "/Regions", json={"Name": " ", "Code": "", "Lat": 0.0, "Long": 0.0}
        )

        assert response.status_code == 400
        assert set(response.json()["errors"]) == {"Name", "Code"}

    def test_delete_region(self, client, region):
        response = client.delete(f"/Regions/{region['Id']}")

        assert response.status_code == 200
        assert response.json() == region
        assert client.get(f"/Regions/{region['Id']}").status_code == 404
        assert client.delete(f"/Regions/{region['Id']}").status_code == 404

    def test_non_finite_coordinates(self, client):
        body = '{"Name": "Otago", "Code": "OTA", "Lat": NaN, "Long": Infinity}'

        response = client.post(
            "/Regions", content=body, headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert set(response.json()["errors"]) == {"Lat", "Long"}
        assert client.get("/Regions").json() == []

    def test_non_finite_coordinates_on_update(self, client, region, otago_payload):
        body = json.dumps({**otago_payload, "Lat": 0}).replace('"Lat": 0', '"Lat": -1e400')

        response = client.put(
            f"/Regions/{region['Id']}",
            content=body,
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert set(response.json()["errors"]) == {"Lat"}
        assert client.get(f"/Regions/{region['Id']}").json() == region


class TestRegionDeletePolicy:
    """Test what happens to walks when their region is deleted"""

    def test_ignore_leaves_walks(self, client, walk):
        assert client.delete(f"/Regions/{walk['RegionId']}").status_code == 200
        assert client.get(f"/Walks/{walk['Id']}").status_code == 200

    def test_restrict_refuses_while_referenced(self, client, configure, walk):
        configure(REFERENCE_DELETE_POLICY="restrict")

        response = client.delete(f"/Regions/{walk['RegionId']}")

        assert response.status_code == 409
        assert response.json()["error"] == "reference_conflict"
        assert client.get(f"/Regions/{walk['RegionId']}").status_code == 200

    def test_restrict_allows_unreferenced(self, client, configure, region):
        configure(REFERENCE_DELETE_POLICY="restrict")
        assert client.delete(f"/Regions/{region['Id']}").status_code == 200

    def test_cascade_removes_walks(self, client, configure, walk):
        configure(REFERENCE_DELETE_POLICY="cascade")

        assert client.delete(f"/Regions/{walk['RegionId']}").status_code == 200
        assert client.get(f"/Walks/{walk['Id']}").status_code == 404

    def test_cascade_unknown_region(self, client, configure):
        configure(REFERENCE_DELETE_POLICY="cascade")
        assert client.delete(f"/Regions/{uuid.uuid4()}").status_code == 404
