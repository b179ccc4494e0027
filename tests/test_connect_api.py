"""Unit tests for ConnectConfigurationsAPI module."""

import json
import re

import pytest

from docusign_tools.api.client import DocuSignClient
from docusign_tools.api.connect import ConnectConfigurationsAPI
from docusign_tools.exceptions import APIStatusError, SerializationError
from docusign_tools.models import (
    ConnectConfigResults,
    ConnectCustomConfiguration,
    IntegratedUserInfoList,
)

CONNECT_URL = "https://demo.docusign.net/restapi/v2.1/accounts/A1/connect"


class TestGetConfig:
    """Tests for ConnectConfigurationsAPI.get_config()."""

    async def test_get_config_returns_results(self, httpx_mock, mock_config, connect_config_results):
        """Verify get_config decodes every configuration."""
        httpx_mock.add_response(url=CONNECT_URL, method="GET", json=connect_config_results)

        async with DocuSignClient(mock_config) as client:
            results = await ConnectConfigurationsAPI(client).get_config("A1")

        assert isinstance(results, ConnectConfigResults)
        assert results.total_records == "2"
        assert [c.connect_id for c in results.configurations] == ["1234567", "7654321"]
        first = results.configurations[0]
        assert first.url_to_publish_to == "https://hooks.example.com/docusign"
        assert first.envelope_events == ["Sent", "Delivered", "Completed"]
        assert first.event_data.include_data == ["recipients", "tabs"]
        assert first.is_enabled
        assert not results.configurations[1].is_enabled

    async def test_account_id_is_percent_encoded(self, httpx_mock, mock_config):
        """Verify reserved characters in the account ID are escaped in the path."""
        httpx_mock.add_response(url=re.compile(r".*/connect$"), json={"configurations": []})

        async with DocuSignClient(mock_config) as client:
            await ConnectConfigurationsAPI(client).get_config("acct/with space?")

        request = httpx_mock.get_request()
        assert request.url.raw_path == b"/restapi/v2.1/accounts/acct%2Fwith%20space%3F/connect"


class TestWriteConfiguration:
    """Tests for creating and updating Connect configurations."""

    async def test_post_configuration_sends_body(self, httpx_mock, mock_config):
        """Verify post_configuration POSTs JSON and returns the created record."""
        httpx_mock.add_response(
            url=CONNECT_URL,
            method="POST",
            json={
                "connectId": "999",
                "name": "New listener",
                "urlToPublishTo": "https://hooks.example.com/new",
                "allowEnvelopePublish": "true",
            },
        )
        body = ConnectCustomConfiguration(
            name="New listener",
            url_to_publish_to="https://hooks.example.com/new",
            allow_envelope_publish="true",
            envelope_events=["Completed"],
        )

        async with DocuSignClient(mock_config) as client:
            created = await ConnectConfigurationsAPI(client).post_configuration("A1", body)

        request = httpx_mock.get_request()
        assert request.method == "POST"
        assert request.url.raw_path == b"/restapi/v2.1/accounts/A1/connect"
        assert json.loads(request.content) == {
            "name": "New listener",
            "urlToPublishTo": "https://hooks.example.com/new",
            "allowEnvelopePublish": "true",
            "envelopeEvents": ["Completed"],
        }
        assert isinstance(created, ConnectCustomConfiguration)
        assert created.connect_id == "999"

    async def test_put_configuration_sends_body(self, httpx_mock, mock_config):
        """Verify put_configuration PUTs JSON and returns the stored record."""
        httpx_mock.add_response(
            url=CONNECT_URL,
            method="PUT",
            json={"connectId": "1234567", "name": "Renamed"},
        )
        body = ConnectCustomConfiguration(connect_id="1234567", name="Renamed")

        async with DocuSignClient(mock_config) as client:
            updated = await ConnectConfigurationsAPI(client).put_configuration("A1", body)

        request = httpx_mock.get_request()
        assert request.method == "PUT"
        assert json.loads(request.content) == {"connectId": "1234567", "name": "Renamed"}
        assert updated.name == "Renamed"


class TestSingleConfiguration:
    """Tests for single-resource Connect operations."""

    async def test_get_config_by_id(self, httpx_mock, mock_config, connect_config_results):
        """Verify get_config_by_id GETs the single-resource path."""
        httpx_mock.add_response(url=f"{CONNECT_URL}/1234567", method="GET", json=connect_config_results)

        async with DocuSignClient(mock_config) as client:
            results = await ConnectConfigurationsAPI(client).get_config_by_id("A1", "1234567")

        assert isinstance(results, ConnectConfigResults)
        assert results.configurations[0].name == "Envelope listener"

    async def test_delete_config_returns_none(self, httpx_mock, mock_config):
        """Verify delete_config returns nothing on success."""
        httpx_mock.add_response(url=f"{CONNECT_URL}/1234567", method="DELETE", status_code=200)

        async with DocuSignClient(mock_config) as client:
            result = await ConnectConfigurationsAPI(client).delete_config("A1", "1234567")

        assert result is None
        request = httpx_mock.get_request()
        assert request.method == "DELETE"
        assert request.content == b""

    async def test_delete_config_404_raises_status_error(self, httpx_mock, mock_config):
        """Verify a missing configuration surfaces as a 404 status error."""
        httpx_mock.add_response(
            url=f"{CONNECT_URL}/nope",
            method="DELETE",
            status_code=404,
            json={"errorCode": "INVALID_CONNECT_ID", "message": "Invalid connect ID."},
        )

        async with DocuSignClient(mock_config) as client:
            with pytest.raises(APIStatusError) as exc_info:
                await ConnectConfigurationsAPI(client).delete_config("A1", "nope")

        assert exc_info.value.status_code == 404

    async def test_connect_id_is_percent_encoded(self, httpx_mock, mock_config):
        """Verify the connect ID cannot escape its path segment."""
        httpx_mock.add_response(url=re.compile(r".*"), json={"configurations": []})

        async with DocuSignClient(mock_config) as client:
            await ConnectConfigurationsAPI(client).get_config_by_id("A1", "../users")

        request = httpx_mock.get_request()
        assert request.url.raw_path == b"/restapi/v2.1/accounts/A1/connect/..%2Fusers"

    async def test_delete_config_ignores_non_json_body(self, httpx_mock, mock_config):
        """Verify delete_config succeeds whatever the success body contains."""
        httpx_mock.add_response(url=f"{CONNECT_URL}/C1", method="DELETE", status_code=200, text="OK")

        async with DocuSignClient(mock_config) as client:
            result = await ConnectConfigurationsAPI(client).delete_config("A1", "C1")

        assert result is None

    async def test_get_config_empty_body_raises_serialization_error(self, httpx_mock, mock_config):
        """Verify get_config never returns None in place of results."""
        httpx_mock.add_response(url=CONNECT_URL, method="GET", status_code=200)

        async with DocuSignClient(mock_config) as client:
            with pytest.raises(SerializationError):
                await ConnectConfigurationsAPI(client).get_config("A1")


class TestGetUsers:
    """Tests for ConnectConfigurationsAPI.get_users()."""

    async def test_get_users_without_filters(self, httpx_mock, mock_config, connect_users_response):
        """Verify no query parameters are sent when every filter is empty."""
        httpx_mock.add_response(url=re.compile(r".*/connect/1234567/users.*"), json=connect_users_response)

        async with DocuSignClient(mock_config) as client:
            users = await ConnectConfigurationsAPI(client).get_users("A1", "1234567")

        request = httpx_mock.get_request()
        assert request.url.path == "/restapi/v2.1/accounts/A1/connect/1234567/users"
        assert request.url.query == b""
        assert isinstance(users, IntegratedUserInfoList)
        assert [u.email for u in users.users] == ["ada@example.com", "grace@example.com"]
        assert users.total_set_size == "2"

    async def test_get_users_filters_in_order(self, httpx_mock, mock_config, connect_users_response):
        """Verify non-empty filters are sent once each, in the documented order."""
        httpx_mock.add_response(url=re.compile(r".*/users\?.*"), json=connect_users_response)

        async with DocuSignClient(mock_config) as client:
            await ConnectConfigurationsAPI(client).get_users(
                "A1",
                "1234567",
                count="10",
                email_substring="ada@example.com",
                list_included_users="",
                start_position="5",
                status="Active,Closed",
                user_name_substring="Ada L",
            )

        request = httpx_mock.get_request()
        assert request.url.query == (
            b"count=10&email_substring=ada%40example.com&start_position=5"
            b"&status=Active%2CClosed&user_name_substring=Ada+L"
        )
        assert "list_included_users" not in request.url.params

    async def test_get_users_single_filter(self, httpx_mock, mock_config, connect_users_response):
        """Verify a single filter produces exactly one key=value pair."""
        httpx_mock.add_response(url=re.compile(r".*/users\?.*"), json=connect_users_response)

        async with DocuSignClient(mock_config) as client:
            await ConnectConfigurationsAPI(client).get_users("A1", "1234567", list_included_users="true")

        request = httpx_mock.get_request()
        assert list(request.url.params.multi_items()) == [("list_included_users", "true")]
