"""Build resources, spine and metadata from the package file."""

import logging

from epubdoc.core.xmlutils import ElementTree, XMLReader
from epubdoc.models.package import Package, ResourceEntry

log = logging.getLogger(__name__)


class PackageBuilder:
    """Parse a package file (OPF) into a :class:`Package`."""

    def __init__(self, data: bytes, root_file: str, root_base: str):
        """Initialize the builder.

        Args:
            data: Raw bytes of the package file
            root_file: Archive path the package file was read from
            root_base: Prefix joined to every manifest href
        """
        self.data = data
        self.root_file = root_file
        self.root_base = root_base

    def build(self) -> Package:
        """Run the manifest, spine and metadata passes.

        Any missing section or attribute aborts the whole build.
        """
        tree = XMLReader(self.data).parse_xml()

        resources = self._read_manifest(tree)
        spine = self._read_spine(tree)
        metadata = self._read_metadata(tree)

        log.debug(
            "Package %s: %d resources, %d spine items, %d metadata keys",
            self.root_file,
            len(resources),
            len(spine),
            len(metadata),
        )
        return Package(
            root_file=self.root_file,
            root_base=self.root_base,
            resources=resources,
            spine=spine,
            metadata=metadata,
        )

    def _read_manifest(self, tree: ElementTree) -> dict[str, ResourceEntry]:
        resources: dict[str, ResourceEntry] = {}
        manifest = tree.find("manifest")
        for item in tree.children(manifest):
            item_id = item.get_attr("id")
            href = item.get_attr("href")
            media_type = item.get_attr("media-type")
            if item_id in resources:
                log.warning("Duplicate manifest id %r, keeping the later entry", item_id)
            resources[item_id] = ResourceEntry(
                path=self.root_base + href, media_type=media_type
            )
        return resources

    def _read_spine(self, tree: ElementTree) -> tuple[str, ...]:
        # idrefs are not checked against the manifest here
        spine = tree.find("spine")
        return tuple(itemref.get_attr("idref") for itemref in tree.children(spine))

    def _read_metadata(self, tree: ElementTree) -> dict[str, str]:
        metadata: dict[str, str] = {}
        for item in tree.children(tree.find("metadata")):
            if item.name == "meta":
                key = item.get_attr("name")
                value = item.get_attr("content")
            else:
                key = item.name
                value = item.text or ""
            if key in metadata:
                log.debug("Metadata key %r repeated, keeping the later value", key)
            metadata[key] = value
        return metadata
