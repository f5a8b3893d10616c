"""
Mapping - rule set between one source type and one destination type

A mapping is created by AutoMapperConfig.register_mapping(), configured with
chained builder calls and then handed to the execution engine, which only
uses the read API:

    config.register_mapping(User, UserDto) \\
        .for_member("email", lambda user: user.email.lower()) \\
        .for_member("password", Operation.ignore()) \\
        .with_naming_conventions(SnakeCaseNamingConvention(), CamelCaseNamingConvention()) \\
        .reverse_map()

Thread safety: configure a mapping from a single thread. Once configuration
is finished the mapping and its Options must be treated as read-only; the
operations dict and the Options fields are not synchronized.
"""

import copy
import logging
from typing import Any, Callable, Dict, List, Optional, Union

from objmap.configuration.options import Options
from objmap.exceptions import InvalidPropertyError
from objmap.mapping_operation.base import MappingOperation
from objmap.mapping_operation.operation import Operation
from objmap.naming.naming_convention import NamingConvention

logger = logging.getLogger(__name__)

OperationOrCallback = Union[MappingOperation, Callable[[Any], Any]]


class Mapping:
    """Configuration binding a source type to a destination type"""

    def __init__(self, source_type: Any, destination_type: Any, auto_mapper_config):
        """
        Initialize a mapping

        Args:
            source_type: Source class (or type identifier known to the schema)
            destination_type: Destination class (or type identifier)
            auto_mapper_config: Registry owning this mapping
        """
        self.source_type = source_type
        self.destination_type = destination_type
        self.auto_mapper_config = auto_mapper_config
        self.mapping_operations: Dict[str, MappingOperation] = {}

        # Snapshot of the registry template; later template changes don't leak in.
        self.options: Options = auto_mapper_config.get_options().clone()

    def get_source_class_name(self) -> str:
        return self.auto_mapper_config.schema.type_name(self.source_type)

    def get_destination_class_name(self) -> str:
        return self.auto_mapper_config.schema.type_name(self.destination_type)

    def for_member(self, property_name: str, operation: OperationOrCallback) -> "Mapping":
        """
        Register the operation producing one destination property

        Args:
            property_name: Property name, must exist on the source type
            operation: MappingOperation, or a plain function taking the source object

        Returns:
            Mapping: self, for chaining

        Raises:
            InvalidPropertyError: If the source type has no such property
            TypeError: If `operation` is neither an operation nor callable
        """
        if not self.auto_mapper_config.schema.has_property(self.source_type, property_name):
            raise InvalidPropertyError.from_name_and_class(
                property_name,
                self.get_source_class_name(),
            )

        if not isinstance(operation, MappingOperation):
            if not callable(operation):
                raise TypeError(
                    f"Expected a MappingOperation or callable for {property_name}, "
                    f"got {type(operation).__name__}"
                )
            operation = Operation.map_from(operation)

        operation.set_options(self.options)

        if property_name in self.mapping_operations:
            logger.debug(f"Overwriting operation for {self.get_source_class_name()}.{property_name}")
        self.mapping_operations[property_name] = operation

        return self

    def reverse_map(self, options: Optional[Dict[str, Any]] = None) -> "Mapping":
        """
        Register the mapping for the swapped pair

        Naming conventions are swapped for the reverse mapping when both are
        set. The reverse mapping has its own operations and is not kept in
        sync with this one.

        Args:
            options: Extra option values applied to the reverse mapping

        Returns:
            Mapping: The reverse mapping, for chaining its own configuration
        """
        reverse_mapping = self.auto_mapper_config.register_mapping(
            self.destination_type,
            self.source_type,
        )

        if self.options.should_convert_name():
            reverse_mapping.with_naming_conventions(
                self.options.destination_member_naming_convention,
                self.options.source_member_naming_convention,
            )

        if options:
            reverse_mapping.get_options().update(**options)

        return reverse_mapping

    def get_mapping_operation_for(self, property_name: str) -> MappingOperation:
        """Registered operation for a property, or a fresh default operation"""
        if property_name in self.mapping_operations:
            return self.mapping_operations[property_name]
        return self._get_default_mapping_operation()

    def has_operation_for(self, property_name: str) -> bool:
        return property_name in self.mapping_operations

    def get_registered_properties(self) -> List[str]:
        return list(self.mapping_operations)

    def set_defaults(self, configurator: Callable[[Options], Any]) -> "Mapping":
        """Run `configurator` against this mapping's Options"""
        configurator(self.options)
        return self

    def get_options(self) -> Options:
        return self.options

    def skip_constructor(self) -> "Mapping":
        self.options.skip_constructor()
        return self

    def dont_skip_constructor(self) -> "Mapping":
        self.options.dont_skip_constructor()
        return self

    def with_naming_conventions(
        self,
        source_naming_convention: NamingConvention,
        destination_naming_convention: NamingConvention,
    ) -> "Mapping":
        self.options.set_source_member_naming_convention(source_naming_convention)
        self.options.set_destination_member_naming_convention(destination_naming_convention)
        return self

    def with_default_operation(self, mapping_operation: MappingOperation) -> "Mapping":
        self.options.set_default_mapping_operation(mapping_operation)
        return self

    def _get_default_mapping_operation(self) -> MappingOperation:
        # A copy per call, so configuring it never touches the stored default.
        operation = copy.copy(self.options.default_mapping_operation)
        operation.set_options(self.options)
        return operation

    def __repr__(self):
        return f"<Mapping {self.get_source_class_name()} -> {self.get_destination_class_name()}>"
