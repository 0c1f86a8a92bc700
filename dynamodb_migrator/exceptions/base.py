from typing import Any, Dict, Optional


class MigratorError(Exception):
    """Base exception for all DynamoDB migrator errors.

    A run stops at the first MigratorError. The table and the item position
    the run had reached are kept both as attributes and in ``context``, so
    the log line the CLI prints says where the run stopped.

    Attributes:
        message: Human-readable error message
        original_error: The original exception that caused this error (if any)
        context: Additional context information about the error
        table_name: Table the failing operation targeted, if any
        item_index: Zero-based position of the failing item, if any
    """

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None,
        context: Optional[Dict[str, Any]] = None,
        table_name: Optional[str] = None,
        item_index: Optional[int] = None
    ):
        """Initialize the exception.

        Args:
            message: Human-readable error message
            original_error: The original exception that caused this error
            context: Additional context information about the error
            table_name: Table the failing operation targeted
            item_index: Position of the item being exported or imported
        """
        self.message = message
        self.original_error = original_error
        self.table_name = table_name
        self.item_index = item_index
        self.context = dict(context or {})
        if table_name:
            self.context.setdefault('table_name', table_name)
        if item_index is not None:
            self.context['item_index'] = item_index
        super().__init__(message)

    def __str__(self) -> str:
        error_str = self.message
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            error_str += f" (Context: {context_str})"
        return error_str

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message={self.message!r}, table_name={self.table_name!r}, "
            f"item_index={self.item_index!r}, context={self.context!r})"
        )
