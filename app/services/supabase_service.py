"""
This file defines the SupabaseService class, the concrete implementation of
the BaseDatabaseService interface used to persist form submissions.

It only inserts rows, leveraging the official Supabase Python client library.
The service uses the Supabase URL and service role key from the settings
object it is constructed with.
"""

from app.services.base_database_service import BaseDatabaseService
from app.core.config import Settings, settings
from app.core.exceptions import PersistenceError
from supabase import Client, create_client
from typing import Any, Dict, List, Optional
import logging

logger = logging.getLogger(__name__)


class SupabaseException(PersistenceError):
    pass


class SupabaseService(BaseDatabaseService):
    """
    An implementation of BaseDatabaseService backed by a Supabase project.

    The client is created on first use so that a missing configuration
    surfaces as a SupabaseException on insert rather than at start-up.
    """

    def __init__(self, config: Settings = settings):
        """
        Initializes the SupabaseService with the Supabase URL and service role key
        from the given settings.
        """
        self.base_url = config.SUPABASE_URL
        self.api_key = config.SUPABASE_SERVICE_ROLE_KEY
        self._client: Optional[Client] = None

    @property
    def supabase_client(self) -> Client:
        if self._client is None:
            if not self.base_url or not self.api_key:
                logger.error("Supabase configuration missing for submission storage")
                raise SupabaseException("Supabase configuration missing")
            try:
                self._client = create_client(self.base_url, self.api_key)
            except Exception as e:
                logger.error(f"Failed to create Supabase client with error: {str(e)}")
                raise SupabaseException("Supabase configuration invalid") from e
        return self._client

    def insert_data(
        self, table_name: str, data: Dict[str, Any], **kwargs
    ) -> List[Dict[str, Any]]:
        """
        Inserts a new record into the specified Supabase table.

        Args:
            table_name (str): The name of the Supabase table to insert into.
            data (Dict[str, Any]): Column names and values for the new record.
            **kwargs: Additional keyword arguments (currently not used in this implementation).

        Returns:
            List[Dict[str, Any]]: The inserted rows, including the generated id.

        Raises:
            SupabaseException: If an error occurs during the Supabase insert operation.
        """
        client = self.supabase_client
        try:
            logger.info(f"Inserting into table {table_name} with columns: {sorted(data)}")
            response = (
                client.table(table_name)
                .insert(data)
                .execute()
                .model_dump()
            )
            return response.get("data", [])
        except Exception as e:
            logger.error(
                f"Failed to insert data into table {table_name} with error: {str(e)}"
            )
            raise SupabaseException(
                f"An error occured while inserting into table: {table_name}"
            ) from e


supabase_service = SupabaseService()
