"""
Documentation translator.

Folds the API description into one JSON tree per group and attaches the
signature every configured target gives each function and enum.
"""

import copy
import json
from collections.abc import Sequence
from typing import Any

from loguru import logger

from sklibgen.config import GeneratorConfig
from sklibgen.models import ApiDescription, EnumDescriptor, FunctionDescriptor
from sklibgen.translators.base import SignatureProvider, Translator
from sklibgen.types import TypeRegistry

GROUP_KEYS = (
    "brief",
    "description",
    "functions",
    "typedefs",
    "structs",
    "enums",
    "defines",
)


def _empty_group() -> dict[str, Any]:
    return {key: "" if key in ("brief", "description") else [] for key in GROUP_KEYS}


class DocsTranslator(Translator):
    """Generates the ``api.json`` documentation tree."""

    name = "docs"

    def __init__(
        self,
        description: ApiDescription,
        config: GeneratorConfig,
        targets: Sequence[SignatureProvider] = (),
        registry: TypeRegistry | None = None,
    ) -> None:
        """Initialize with the targets whose signatures are documented.

        Args:
            description: API description to document
            config: Generator configuration
            targets: Signature targets, applied in order
            registry: Registry of declared names
        """
        super().__init__(description, config, registry)
        self.targets = list(targets)

    def render_templates(self) -> dict[str, str]:
        return {self.config.docs_name: json.dumps(self.grouped_data(), indent=2)}

    def post_execute_message(self) -> str | None:
        return f"Place `{self.config.docs_name}` in the data directory of the website"

    def grouped_data(self) -> dict[str, dict[str, Any]]:
        """Group header records and attach per-target signatures."""
        groups: dict[str, dict[str, Any]] = {}
        for header_name, header in self.description.headers.items():
            group_key = header.get("group") or header_name
            group = groups.setdefault(group_key, _empty_group())
            for key in GROUP_KEYS:
                value = header.get(key)
                if not value:
                    continue
                if isinstance(value, list):
                    group[key].extend(copy.deepcopy(value))
                else:
                    group[key] += value

        for group_key, group in groups.items():
            logger.debug(
                f"Group {group_key}: {len(group['functions'])} functions, "
                f"{len(group['enums'])} enums"
            )
            self.map_signatures(group)
        return dict(sorted(groups.items()))

    def map_signatures(self, group: dict[str, Any]) -> None:
        """Attach ``signatures[target.name]`` to functions and enums in place."""
        for target in self.targets:
            for function_data in group["functions"]:
                signatures = function_data.setdefault("signatures", {})
                function = FunctionDescriptor.from_dict(function_data)
                signatures[target.name] = target.signature_for(function)

            enum_signature_for = getattr(target, "enum_signature_for", None)
            if enum_signature_for is None:
                continue
            for enum_data in group["enums"]:
                signature = enum_signature_for(EnumDescriptor.from_dict(enum_data))
                if signature is not None:
                    enum_data.setdefault("signatures", {})[target.name] = signature
