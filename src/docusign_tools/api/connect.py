"""Connect configurations API module."""

from ..models import ConnectConfigResults, ConnectCustomConfiguration, IntegratedUserInfoList
from .client import DocuSignClient
from .urls import build_query, encode_path


class ConnectConfigurationsAPI:
    """API for DocuSign Custom Connect (webhook) configurations.

    Connect must be enabled for the account. These endpoints do not cover
    Connect configurations for Box, eOriginal or Salesforce.
    """

    def __init__(self, client: DocuSignClient):
        self.client = client

    async def get_config(self, account_id: str) -> ConnectConfigResults:
        """
        Retrieve all Custom Connect definitions for an account.

        Performs a GET to ``/v2.1/accounts/{accountId}/connect``.
        """
        url = f"/v2.1/accounts/{encode_path(account_id)}/connect"
        return await self.client.get(url, ConnectConfigResults)

    async def put_configuration(
        self,
        account_id: str,
        config: ConnectCustomConfiguration,
    ) -> ConnectCustomConfiguration:
        """
        Update a Connect configuration.

        Performs a PUT to ``/v2.1/accounts/{accountId}/connect``. The
        configuration to update is identified by ``config.connect_id``.

        Returns:
            The configuration as stored by the server
        """
        url = f"/v2.1/accounts/{encode_path(account_id)}/connect"
        return await self.client.put(url, config, ConnectCustomConfiguration)

    async def post_configuration(
        self,
        account_id: str,
        config: ConnectCustomConfiguration,
    ) -> ConnectCustomConfiguration:
        """
        Create a Custom Connect definition.

        Performs a POST to ``/v2.1/accounts/{accountId}/connect``.

        Returns:
            The created configuration, including its server-assigned connect_id
        """
        url = f"/v2.1/accounts/{encode_path(account_id)}/connect"
        return await self.client.post(url, config, ConnectCustomConfiguration)

    async def get_config_by_id(self, account_id: str, connect_id: str) -> ConnectConfigResults:
        """Retrieve one Connect configuration (``GET .../connect/{connectId}``)."""
        url = f"/v2.1/accounts/{encode_path(account_id)}/connect/{encode_path(connect_id)}"
        return await self.client.get(url, ConnectConfigResults)

    async def delete_config(self, account_id: str, connect_id: str) -> None:
        """Delete a Connect configuration (``DELETE .../connect/{connectId}``)."""
        url = f"/v2.1/accounts/{encode_path(account_id)}/connect/{encode_path(connect_id)}"
        await self.client.delete(url, decode=False)

    async def get_users(
        self,
        account_id: str,
        connect_id: str,
        count: str = "",
        email_substring: str = "",
        list_included_users: str = "",
        start_position: str = "",
        status: str = "",
        user_name_substring: str = "",
    ) -> IntegratedUserInfoList:
        """
        Return users from the configured Connect service.

        Performs a GET to ``/v2.1/accounts/{accountId}/connect/{connectId}/users``.
        Empty filters are left out of the query string.

        Args:
            account_id: Account ID
            connect_id: Connect configuration ID
            count: Maximum number of users to return
            email_substring: Full email address or a substring of it
            list_included_users: "true" to list only users included in the configuration
            start_position: Position in the result set to start from
            status: Comma-separated user statuses (ActivationRequired, ActivationSent,
                Active, Closed, Disabled)
            user_name_substring: Full or partial user name, without wildcards

        Returns:
            IntegratedUserInfoList page
        """
        query = build_query([
            ("count", count),
            ("email_substring", email_substring),
            ("list_included_users", list_included_users),
            ("start_position", start_position),
            ("status", status),
            ("user_name_substring", user_name_substring),
        ])
        url = f"/v2.1/accounts/{encode_path(account_id)}/connect/{encode_path(connect_id)}/users?{query}"
        return await self.client.get(url, IntegratedUserInfoList)
