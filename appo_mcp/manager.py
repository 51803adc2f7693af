# manager.py
# DocsManager (Documentation resources)

import logging
import re
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

from appo_mcp.features import SDK_FEATURES
from appo_mcp.models import DocMetadata, DocReadResult

logger = logging.getLogger(__name__)

BUNDLED_DOCS_DIR = Path(__file__).parent / "docs"

DOC_GLOB = "*.md"

URI_PATTERN = re.compile(r"^appo://(.+)$")

# Listing order for the bundled resources; extra documents follow, sorted by URI
RESOURCE_ORDER: Tuple[str, ...] = (
    *(f"appo://api/{feature}" for feature in SDK_FEATURES),
    *(f"appo://examples/{feature}" for feature in SDK_FEATURES),
    "appo://best-practices",
    "appo://troubleshooting",
    "appo://overview",
)


def parse_uri(uri: str) -> Optional[Tuple[str, Optional[str]]]:
    """Split appo://<type>[/<feature>] into (type, feature); None for anything else."""
    match = URI_PATTERN.match(uri or "")
    if not match:
        return None

    parts = match.group(1).split("/")
    if len(parts) == 1:
        return parts[0], None
    if len(parts) == 2:
        return parts[0], parts[1]
    return None


def split_frontmatter(content: str) -> Tuple[Optional[str], str]:
    """Return (frontmatter, body); frontmatter is None when the file has none."""
    if not content.startswith('---'):
        return None, content

    parts = content.split('---', 2)
    if len(parts) < 3:
        return None, content
    return parts[1], parts[2].strip()


# ============================================================================
# Docs Manager (Single Responsibility: Index and Serve Documentation)
# ============================================================================

class DocsManager:
    """
    Indexes markdown documents with YAML frontmatter and serves them by URI.
    The index is built once; reads go to disk and never change state.
    """
    def __init__(self, docs_dirs: Optional[List[str]] = None):
        if docs_dirs:
            self.docs_dirs = [Path(d) for d in docs_dirs]
        else:
            self.docs_dirs = [BUNDLED_DOCS_DIR]

        # uri -> {"metadata": DocMetadata, "path": Path, "source_dir": Path}
        self._available_docs: Dict[str, Dict] = {}

        self._scan_directories()

    def _scan_directories(self) -> None:
        """Scan all docs directories and parse metadata from every markdown file"""
        self._available_docs.clear()

        for docs_dir in self.docs_dirs:
            if not docs_dir.exists():
                logger.warning("Docs directory does not exist: %s", docs_dir)
                continue

            for md_file in sorted(docs_dir.rglob(DOC_GLOB)):
                try:
                    metadata = self._parse_doc_metadata(md_file)
                except Exception as e:
                    logger.warning("Failed to parse %s in folder %s: %s", md_file.name, md_file.parent.name, e)
                    continue

                # Handle duplicates: first directory in list wins
                if metadata.uri in self._available_docs:
                    logger.warning(
                        "Duplicate resource '%s' found in %s. Using version from %s",
                        metadata.uri, docs_dir, self._available_docs[metadata.uri]['source_dir'],
                    )
                    continue

                self._available_docs[metadata.uri] = {
                    "metadata": metadata,
                    "path": md_file,
                    "source_dir": docs_dir,
                }

        logger.debug("Indexed %d documentation resource(s)", len(self._available_docs))

    def _parse_doc_metadata(self, file_path: Path) -> DocMetadata:
        """
        Parse YAML frontmatter from a document and extract metadata only.
        The body is read separately by read_resource.
        """
        frontmatter, _ = split_frontmatter(file_path.read_text(encoding='utf-8'))
        if frontmatter is None:
            raise ValueError(f"File {file_path.name} in {file_path.parent.name} missing YAML frontmatter")

        fields = yaml.safe_load(frontmatter) or {}
        if not isinstance(fields, dict) or not parse_uri(str(fields.get('uri', ''))):
            raise ValueError(f"Invalid or missing appo:// uri in {file_path.name}")

        # Pydantic validation happens here
        return DocMetadata(
            uri=fields['uri'],
            name=fields.get('name', fields['uri']),
            description=fields.get('description', ''),
            mime_type=fields.get('mime_type', 'text/markdown'),
        )

    def resource_exists(self, uri: str) -> bool:
        return uri in self._available_docs

    def list_resources(self) -> List[DocMetadata]:
        """Metadata for every indexed document (lightweight)"""
        rank = {uri: index for index, uri in enumerate(RESOURCE_ORDER)}
        uris = sorted(self._available_docs, key=lambda uri: (rank.get(uri, len(rank)), uri))
        return [self._available_docs[uri]['metadata'] for uri in uris]

    def read_resource(self, uri: str) -> DocReadResult:
        """
        Return the body of a document. Unknown URIs produce an explanatory
        text with status="error" instead of raising.
        """
        if not self.resource_exists(uri):
            return DocReadResult(status="error", uri=uri, text=self._unknown_resource_text(uri))

        doc = self._available_docs[uri]
        try:
            _, body = split_frontmatter(doc['path'].read_text(encoding='utf-8'))
        except OSError as e:
            logger.error("Failed to read %s: %s", doc['path'], e)
            return DocReadResult(status="error", uri=uri, text=f"Failed to read resource {uri}: {e}")

        return DocReadResult(
            status="ok",
            uri=uri,
            mime_type=doc['metadata'].mime_type,
            text=body,
        )

    @staticmethod
    def _unknown_resource_text(uri: str) -> str:
        parsed = parse_uri(uri)
        if parsed is None:
            return f"Unknown resource: {uri}"

        resource_type, feature = parsed
        if resource_type == "api":
            return f"No API documentation found for feature: {feature}"
        if resource_type == "examples":
            return f"No examples found for feature: {feature}"
        return f"Unknown resource type: {resource_type}"
