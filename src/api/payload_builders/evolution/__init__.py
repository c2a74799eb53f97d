"""Builders de payload para a Evolution API.

Uso:
    from api.payload_builders.evolution import ListPayloadBuilder

    builder = ListPayloadBuilder()
    request = builder.build_request(context)
    payload = builder.build_full_payload(request)
"""

from api.payload_builders.evolution.list_message import ListPayloadBuilder
from api.payload_builders.evolution.options import (
    apply_options,
    normalize_mention,
    parse_mentioned,
    parse_options,
)
from api.payload_builders.evolution.sections import (
    build_auto_sections,
    build_manual_sections,
)

__all__ = [
    "ListPayloadBuilder",
    "apply_options",
    "build_auto_sections",
    "build_manual_sections",
    "normalize_mention",
    "parse_mentioned",
    "parse_options",
]
