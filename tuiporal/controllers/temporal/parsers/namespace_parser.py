"""Namespace parser for the Temporal controller."""

from __future__ import annotations

from typing import Any

from tuiporal.constants.enums import NamespaceState
from tuiporal.models.core.namespace_record import NamespaceRecord


class NamespaceParser:
    """Parses ``DescribeNamespaceResponse`` messages."""

    def parse_namespace(self, response: Any) -> NamespaceRecord:
        info = response.namespace_info
        retention = None
        if response.HasField("config") and response.config.HasField(
            "workflow_execution_retention_ttl"
        ):
            retention = response.config.workflow_execution_retention_ttl.ToTimedelta()
        return NamespaceRecord(
            name=info.name,
            namespace_id=info.id,
            state=NamespaceState.from_proto(int(info.state)),
            description=info.description,
            owner_email=info.owner_email,
            retention=retention,
        )

    def parse_namespaces(self, responses: Any) -> tuple[NamespaceRecord, ...]:
        return tuple(self.parse_namespace(response) for response in responses)
