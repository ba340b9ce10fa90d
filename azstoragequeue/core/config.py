"""Configuration management using Pydantic Settings.

Loads Azure Storage Queue credentials from environment variables or a .env file.
Pass a QueueConfig explicitly to StorageQueueClient to avoid touching the environment.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class QueueConfig(BaseSettings):
    """Storage account configuration - loads from AZURE_QUEUE_* variables or .env file."""

    # Credentials (either a full connection string or account name + key)
    connection_string: str | None = Field(default=None, description="Full storage connection string")
    account_name: str | None = Field(default=None, description="Storage account name")
    account_key: str | None = Field(default=None, description="Storage account access key")

    # Endpoint
    endpoint_protocol: str = Field(default="https", pattern="^(http|https)$", description="Endpoint protocol")
    endpoint_suffix: str = Field(default="core.windows.net", description="Storage endpoint suffix")

    # Queue
    queue_name: str | None = Field(default=None, description="Default queue name")

    model_config = SettingsConfigDict(
        env_prefix="AZURE_QUEUE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    def get_connection_string(self) -> str:
        """
        Build the storage connection string.

        Returns:
            connection_string when set, otherwise one assembled from account name and key

        Raises:
            ValueError: If neither a connection string nor account name + key is configured
        """
        if self.connection_string:
            return self.connection_string

        if not self.account_name or not self.account_key:
            raise ValueError(
                "Storage credentials are not configured. "
                "Set AZURE_QUEUE_CONNECTION_STRING or AZURE_QUEUE_ACCOUNT_NAME and AZURE_QUEUE_ACCOUNT_KEY."
            )

        return (
            f"DefaultEndpointsProtocol={self.endpoint_protocol};"
            f"AccountName={self.account_name};"
            f"AccountKey={self.account_key};"
            f"EndpointSuffix={self.endpoint_suffix}"
        )


# Singleton instance
config = QueueConfig()
