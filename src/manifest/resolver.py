"""Resolve raw manifest groups into framework-keyed groups.

Rules:
- frameworkAssembly attributes may list several frameworks separated by commas;
  the element's items are replicated under each of them.
- A missing or empty attribute means the framework-agnostic group (ANY).
- Groups with the same recognized framework merge; duplicate item names keep
  their first position and take the later item's data.
- Unsupported frameworks never merge, each group stays on its own.
- frameworkAssembly items are sorted by name; other kinds keep first-seen order.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Tuple

from common.logging_utils import Timer, extra_context, is_debug_enabled
from frameworks import FrameworkIdentity
from versioning import VersionFormatError, VersionRange

from .models import (
    FrameworkSpecificGroup,
    GroupKind,
    ManifestDocument,
    ManifestFormatError,
    ManifestItem,
    PackageDependency,
    RawGroup,
    ResolvedManifest,
)

logger = logging.getLogger(__name__)


class ManifestGroupResolver:
    """Stateless resolver; one instance may be shared between callers."""

    def resolve(self, document: ManifestDocument) -> ResolvedManifest:
        """Resolve all three group kinds of a manifest document."""
        return ResolvedManifest(
            dependency_groups=self.resolve_dependency_groups(document),
            reference_groups=self.resolve_reference_groups(document),
            framework_assembly_groups=self.resolve_framework_assembly_groups(document),
        )

    def resolve_dependency_groups(self, document: ManifestDocument) -> Tuple[FrameworkSpecificGroup, ...]:
        return self.resolve_groups(document.groups_of(GroupKind.DEPENDENCY), GroupKind.DEPENDENCY)

    def resolve_reference_groups(self, document: ManifestDocument) -> Tuple[FrameworkSpecificGroup, ...]:
        return self.resolve_groups(document.groups_of(GroupKind.REFERENCE), GroupKind.REFERENCE)

    def resolve_framework_assembly_groups(
        self, document: ManifestDocument
    ) -> Tuple[FrameworkSpecificGroup, ...]:
        return self.resolve_groups(
            document.groups_of(GroupKind.FRAMEWORK_ASSEMBLY), GroupKind.FRAMEWORK_ASSEMBLY
        )

    def resolve_groups(
        self, raw_groups: Iterable[RawGroup], kind: GroupKind
    ) -> Tuple[FrameworkSpecificGroup, ...]:
        """Fold raw groups of one kind into ordered framework-specific groups.

        Args:
            raw_groups: Groups in document order; all must be of ``kind``.
            kind: Group kind being resolved.

        Returns:
            Groups in order of first appearance of their framework.

        Raises:
            ManifestFormatError: An item has no name or a group has the wrong kind.
            VersionFormatError: A dependency version is malformed (``item_name`` is set).
        """
        with Timer() as timer:
            slots: List[Tuple[FrameworkIdentity, Dict[str, Any]]] = []
            known: Dict[FrameworkIdentity, int] = {}

            for raw_group in raw_groups:
                if raw_group.kind is not kind:
                    raise ManifestFormatError(
                        f"expected a {kind.value} group, got {raw_group.kind.value}",
                        element=raw_group.kind.value,
                    )
                items = [self._convert_item(kind, item) for item in raw_group.items]

                for framework_text in self._split_frameworks(kind, raw_group.target_framework):
                    framework = FrameworkIdentity.parse(framework_text)
                    if framework.is_unsupported:
                        logger.debug("Unsupported target framework %r kept as its own group", framework.raw)
                        index = len(slots)
                        slots.append((framework, {}))
                    else:
                        index = known.get(framework, -1)
                        if index < 0:
                            index = len(slots)
                            slots.append((framework, {}))
                            known[framework] = index
                    bucket = slots[index][1]
                    for key, value in items:
                        bucket[key] = value

            groups = []
            for framework, bucket in slots:
                values = list(bucket.values())
                if kind is GroupKind.FRAMEWORK_ASSEMBLY:
                    values.sort()
                groups.append(FrameworkSpecificGroup(framework, tuple(values)))

        if is_debug_enabled(logger):
            logger.debug("Resolved manifest groups", extra=extra_context(
                event="resolve_groups", component="manifest_resolver", action=kind.value,
                count=len(groups), unsupported=sum(1 for g in groups if g.target_framework.is_unsupported),
                duration_ms=timer.duration_ms(),
            ))
        return tuple(groups)

    @staticmethod
    def _split_frameworks(kind: GroupKind, attribute) -> List[str]:
        text = (attribute or "").strip()
        if kind is GroupKind.FRAMEWORK_ASSEMBLY and "," in text:
            parts = [part.strip() for part in text.split(",") if part.strip()]
            return parts or [""]
        return [text]

    @staticmethod
    def _convert_item(kind: GroupKind, item: ManifestItem) -> Tuple[str, Any]:
        """Return (dedup key, resolved item) for a raw item record."""
        name = (item.name or "").strip()
        if not name:
            raise ManifestFormatError(f"{kind.value} is missing its name", element=kind.value)
        if kind is not GroupKind.DEPENDENCY:
            return name, name

        version_range = None
        if item.version is not None and item.version.strip():
            try:
                version_range = VersionRange.parse(item.version)
            except VersionFormatError as exc:
                raise VersionFormatError(item.version, exc.reason, item_name=name) from exc
        # Package ids are case-insensitive.
        return name.lower(), PackageDependency(name, version_range)
