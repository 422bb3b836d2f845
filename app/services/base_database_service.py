from typing import Any, Dict, List


class BaseDatabaseService:
    """
    Base class for database service implementations.

    Form submissions are append-only, so the interface exposes inserts only.
    Concrete database service implementations should inherit from this class
    and override `insert_data` to provide the actual store interaction.
    """

    def insert_data(self, table_name: str, data: Dict[str, Any], **kwargs) -> List[Dict[str, Any]]:
        """
        Inserts a new record into the specified table.

        This is a default stub method that must be overridden by concrete
        subclasses to provide the actual database insertion logic.

        Args:
            table_name (str): The name of the table to insert into.
            data (Dict[str, Any]): Column names and values for the new record.
            **kwargs: Additional keyword arguments that might be specific
                      to the underlying database implementation.

        Returns:
            List[Dict[str, Any]]: The inserted rows, including store generated columns.

        Raises:
            NotImplementedError: If this method is called directly from the
                                 BaseDatabaseService class.
        """
        cls_name = type(self).__name__
        raise NotImplementedError(f"{cls_name}.insert_data not implemented")
