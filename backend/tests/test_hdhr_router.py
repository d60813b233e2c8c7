"""Integration tests for the per-lineup HDHomeRun endpoints."""

import xml.etree.ElementTree as ET

import pytest
from fastapi import status
from fastapi.testclient import TestClient

from services.discovery import UPNP_DEVICE_NAMESPACE


@pytest.mark.integration
class TestHdhrEndpoints:
    def test_discover_json(self, client: TestClient, lineup_factory):
        lineup = lineup_factory(name="Plex Tuner", discovery_address="10.0.0.5", port=6077, tuners=2)

        response = client.get(f"/lineup/{lineup.id}/discover.json")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["FriendlyName"] == "Plex Tuner"
        assert data["TunerCount"] == 2
        assert data["BaseURL"] == "http://10.0.0.5:6077"
        assert data["LineupURL"] == "http://10.0.0.5:6077/lineup.json"

    def test_discover_json_follows_updates(self, client: TestClient, lineup_factory):
        lineup = lineup_factory(port=6077)
        client.patch(f"/api/v1/lineups/{lineup.id}", json={"port": 5004})

        data = client.get(f"/lineup/{lineup.id}/discover.json").json()

        assert data["BaseURL"] == "http://10.0.0.5:5004"

    def test_lineup_json_lists_active_channels(self, client: TestClient, lineup_factory, channel_factory):
        lineup = lineup_factory()
        channel_factory(lineup.id, 9.1, title="PBS", stream_url="http://s/pbs")
        channel_factory(lineup.id, 4.0, title="NBC", stream_url="http://s/nbc")
        channel_factory(lineup.id, 5.0, title="Off Air", active=False)

        response = client.get(f"/lineup/{lineup.id}/lineup.json")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == [
            {"GuideNumber": "4", "GuideName": "NBC", "URL": "http://s/nbc"},
            {"GuideNumber": "9.1", "GuideName": "PBS", "URL": "http://s/pbs"},
        ]

    def test_lineup_status(self, client: TestClient, lineup_factory):
        lineup = lineup_factory()

        response = client.get(f"/lineup/{lineup.id}/lineup_status.json")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["ScanInProgress"] == 0

    def test_device_xml(self, client: TestClient, lineup_factory):
        lineup = lineup_factory()

        response = client.get(f"/lineup/{lineup.id}/device.xml")

        assert response.status_code == status.HTTP_200_OK
        assert response.headers["content-type"].startswith("application/xml")
        root = ET.fromstring(response.content)
        ns = {"u": UPNP_DEVICE_NAMESPACE}
        assert root.find("u:device/u:UDN", ns).text == lineup.device_uuid
        assert root.find("u:URLBase", ns).text == "http://10.0.0.5:6077"

    def test_device_xml_is_stable(self, client: TestClient, lineup_factory):
        lineup = lineup_factory()

        first = client.get(f"/lineup/{lineup.id}/device.xml").content
        second = client.get(f"/lineup/{lineup.id}/device.xml").content

        assert first == second

    @pytest.mark.parametrize(
        "path",
        ["discover.json", "lineup.json", "lineup_status.json", "device.xml"],
    )
    def test_unknown_lineup_is_404(self, client: TestClient, path: str):
        response = client.get(f"/lineup/404/{path}")

        assert response.status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.integration
class TestAdvertisedEndpoints:
    """The URLs a lineup advertises resolve back to that lineup."""

    def test_advertised_lineup_url_serves_channels(self, client: TestClient, lineup_factory, channel_factory):
        lineup = lineup_factory(discovery_address="10.0.0.5", port=6077)
        channel_factory(lineup.id, 7.0, title="ABC", stream_url="http://s/abc")

        lineup_url = client.get(f"/lineup/{lineup.id}/discover.json").json()["LineupURL"]
        response = client.get(lineup_url)

        assert lineup_url == "http://10.0.0.5:6077/lineup.json"
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == [{"GuideNumber": "7", "GuideName": "ABC", "URL": "http://s/abc"}]

    def test_advertised_base_url_serves_every_document(self, client: TestClient, lineup_factory):
        lineup = lineup_factory(name="Den", discovery_address="10.0.0.5", port=6077)
        base_url = client.get(f"/lineup/{lineup.id}/discover.json").json()["BaseURL"]

        discover = client.get(f"{base_url}/discover.json")
        device = client.get(f"{base_url}/device.xml")
        status_response = client.get(f"{base_url}/lineup_status.json")

        assert discover.json()["FriendlyName"] == "Den"
        root = ET.fromstring(device.content)
        ns = {"u": UPNP_DEVICE_NAMESPACE}
        assert root.find("u:device/u:UDN", ns).text == lineup.device_uuid
        assert root.find("u:URLBase", ns).text == base_url
        assert status_response.status_code == status.HTTP_200_OK

    def test_lineups_are_told_apart_by_port(self, client: TestClient, lineup_factory):
        lineup_factory(name="First", port=6077)
        lineup_factory(name="Second", port=6078)

        first = client.get("http://10.0.0.5:6077/discover.json").json()
        second = client.get("http://10.0.0.5:6078/discover.json").json()

        assert first["FriendlyName"] == "First"
        assert second["FriendlyName"] == "Second"

    def test_port_change_moves_the_lineup(self, client: TestClient, lineup_factory):
        lineup = lineup_factory(port=6077)
        client.patch(f"/api/v1/lineups/{lineup.id}", json={"port": 5004})

        assert client.get("http://10.0.0.5:6077/lineup.json").status_code == status.HTTP_404_NOT_FOUND
        assert client.get("http://10.0.0.5:5004/lineup.json").status_code == status.HTTP_200_OK

    def test_unadvertised_address_is_404(self, client: TestClient, lineup_factory):
        lineup_factory(discovery_address="10.0.0.5", port=6077)

        response = client.get("http://10.0.0.9:6077/discover.json")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["detail"] == "No lineup advertised at 10.0.0.9:6077"
