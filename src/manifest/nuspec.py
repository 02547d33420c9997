"""Nuspec reader: build a ManifestDocument from nuspec XML.

Namespaces are ignored (they may sit on ``package`` or on ``metadata`` and
vary between schema revisions), matching how project files are scanned
elsewhere.
"""
from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from typing import Dict, List, Optional, Tuple, Union

from versioning import NuGetVersion

from .models import (
    FrameworkSpecificGroup,
    GroupKind,
    ManifestDocument,
    ManifestFormatError,
    ManifestItem,
    RawGroup,
)
from .resolver import ManifestGroupResolver

logger = logging.getLogger(__name__)


def _strip_namespaces(root: ET.Element) -> None:
    for elem in root.iter():
        if isinstance(elem.tag, str) and "}" in elem.tag:
            elem.tag = elem.tag.split("}", 1)[1]


class NuspecReader:
    """Read package metadata and framework groups from a nuspec document."""

    def __init__(self, content: Union[str, bytes], resolver: Optional[ManifestGroupResolver] = None):
        """Parse nuspec content.

        Args:
            content: Nuspec XML as text or bytes.
            resolver: Group resolver to use; a default one is created when omitted.

        Raises:
            ManifestFormatError: Invalid XML, wrong root element or missing metadata.
        """
        try:
            root = ET.fromstring(content.strip())
        except ET.ParseError as exc:
            raise ManifestFormatError(f"Invalid nuspec XML: {exc}", element="package") from exc
        _strip_namespaces(root)
        if root.tag != "package":
            raise ManifestFormatError("nuspec root must be <package>", element=root.tag)
        metadata = root.find("metadata")
        if metadata is None:
            raise ManifestFormatError("nuspec is missing its metadata", element="metadata")
        self._metadata = metadata
        self._resolver = resolver or ManifestGroupResolver()
        self._document: Optional[ManifestDocument] = None

    def _value(self, tag: str) -> Optional[str]:
        node = self._metadata.find(tag)
        if node is None or node.text is None:
            return None
        text = node.text.strip()
        return text or None

    def _required(self, tag: str) -> str:
        value = self._value(tag)
        if value is None:
            raise ManifestFormatError(f"required metadata '{tag}' is missing", element=tag)
        return value

    def get_id(self) -> str:
        return self._required("id")

    def get_version(self) -> NuGetVersion:
        return NuGetVersion.parse(self._required("version"))

    def get_title(self) -> Optional[str]:
        return self._value("title")

    def get_authors(self) -> Optional[str]:
        return self._value("authors")

    def get_description(self) -> Optional[str]:
        return self._value("description")

    def get_language(self) -> Optional[str]:
        return self._value("language")

    def get_metadata(self) -> Dict[str, str]:
        """Simple (leaf) metadata elements as a tag -> text mapping."""
        values: Dict[str, str] = {}
        for child in self._metadata:
            if len(child) == 0 and child.text and child.text.strip():
                values[child.tag] = child.text.strip()
        return values

    def get_document(self) -> ManifestDocument:
        """Raw groups of every kind, in document order."""
        if self._document is None:
            groups: List[RawGroup] = []
            dependencies = self._metadata.find("dependencies")
            if dependencies is not None:
                groups.extend(self._read_groups(dependencies, GroupKind.DEPENDENCY, "dependency", "id"))
            references = self._metadata.find("references")
            if references is not None:
                groups.extend(self._read_groups(references, GroupKind.REFERENCE, "reference", "file"))
            assemblies = self._metadata.find("frameworkAssemblies")
            if assemblies is not None:
                for node in assemblies.findall("frameworkAssembly"):
                    item = self._read_item(node, "assemblyName")
                    groups.append(RawGroup(GroupKind.FRAMEWORK_ASSEMBLY, node.get("targetFramework"), (item,)))
            self._document = ManifestDocument(tuple(groups))
            logger.debug("Read %d raw groups from nuspec", len(groups))
        return self._document

    def get_dependency_groups(self) -> Tuple[FrameworkSpecificGroup, ...]:
        return self._resolver.resolve_dependency_groups(self.get_document())

    def get_reference_groups(self) -> Tuple[FrameworkSpecificGroup, ...]:
        return self._resolver.resolve_reference_groups(self.get_document())

    def get_framework_reference_groups(self) -> Tuple[FrameworkSpecificGroup, ...]:
        return self._resolver.resolve_framework_assembly_groups(self.get_document())

    def _read_groups(self, container: ET.Element, kind: GroupKind, item_tag: str, name_attr: str) -> List[RawGroup]:
        groups: List[RawGroup] = []
        version_attr = "version" if kind is GroupKind.DEPENDENCY else None

        grouped = container.findall("group")
        if not grouped:
            # Flat layout: direct children apply to every framework.
            items = tuple(self._read_item(node, name_attr, version_attr) for node in container.findall(item_tag))
            if items:
                groups.append(RawGroup(kind, None, items))
            return groups

        for group in grouped:
            items = tuple(self._read_item(node, name_attr, version_attr) for node in group.findall(item_tag))
            groups.append(RawGroup(kind, group.get("targetFramework"), items))
        return groups

    @staticmethod
    def _read_item(node: ET.Element, name_attr: str, version_attr: Optional[str] = None) -> ManifestItem:
        name = node.get(name_attr)
        if name is None or not name.strip():
            raise ManifestFormatError(f"missing required attribute '{name_attr}'", element=node.tag)
        version = node.get(version_attr) if version_attr else None
        return ManifestItem(name.strip(), version)
