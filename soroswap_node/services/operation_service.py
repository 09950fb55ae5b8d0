"""
Operation registry: resolves operation identifiers to operation instances.
"""

from typing import Any, Dict, Iterable, List, Optional, Type

import structlog

from ..exceptions import UnknownOperationError
from ..models.enums import OperationName
from ..operations import ALL_OPERATIONS, Operation

logger = structlog.get_logger(__name__)


def _kebab_case(identifier: str) -> str:
    out = []
    for char in identifier:
        if char.isupper():
            out.append("-")
            out.append(char.lower())
        else:
            out.append(char)
    return "".join(out)


class OperationService:
    """Registry for the node's closed set of operations."""

    def __init__(self, operation_classes: Optional[Iterable[Type[Operation]]] = None):
        self._operation_classes = tuple(operation_classes or ALL_OPERATIONS)
        self._require_complete = operation_classes is None
        self.operations: Dict[OperationName, Operation] = {}
        self._aliases: Dict[str, OperationName] = {}
        self._loaded = False

    def load_operations(self) -> Dict[OperationName, Operation]:
        """Instantiate every registered operation."""
        if self._loaded:
            return self.operations

        for operation_class in self._operation_classes:
            operation = operation_class()
            if operation.name in self.operations:
                raise ValueError(f"Duplicate operation registered: {operation.name.value}")
            self.operations[operation.name] = operation
            self._aliases[operation.name.value] = operation.name
            self._aliases[_kebab_case(operation.name.value)] = operation.name

        missing = set(OperationName) - set(self.operations)
        if missing and self._require_complete:
            raise ValueError(f"Operations without implementation: {sorted(m.value for m in missing)}")

        self._loaded = True
        logger.debug("Loaded operations", operations=[name.value for name in self.operations])
        return self.operations

    def get_operation(self, identifier: Any) -> Operation:
        """
        Get operation by identifier.

        Accepts an ``OperationName``, its camelCase value or the kebab-case
        form (``get-pool-by-tokens``).

        Raises:
            UnknownOperationError: If no operation matches
        """
        if not self._loaded:
            self.load_operations()

        if isinstance(identifier, OperationName):
            name = identifier
        elif isinstance(identifier, str):
            name = self._aliases.get(identifier.strip())
        else:
            name = None

        if name is None or name not in self.operations:
            raise UnknownOperationError(identifier)
        return self.operations[name]

    def get_operation_names(self) -> List[str]:
        if not self._loaded:
            self.load_operations()
        return [name.value for name in self.operations]

    def get_operations_metadata(self) -> List[Dict[str, Any]]:
        if not self._loaded:
            self.load_operations()
        return [op.get_metadata() for op in self.operations.values()]
