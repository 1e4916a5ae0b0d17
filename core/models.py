# =============================================================================
# core/models.py  —  Data Models (the "nouns" of the system)
# =============================================================================
#
# These dataclasses define the shape of every piece of information that flows
# through a single documentation lookup:
#
#   SearchRequest  →  what we POST to the Quillopy API
#   Document       →  one documentation snippet the API sends back
#   SearchResult   →  the parsed response body (documents + instructions)
#   Found/NoResult →  what the API client hands to the formatter
#
# Nothing here lives longer than one tool invocation.  Objects are built,
# read once, and dropped.
#
# PARSING REMOTE DATA:
#   The API response is trusted for ORDER but not for SHAPE.  from_payload()
#   turns anything unexpected (missing keys, nulls, wrong types) into empty
#   values so the formatter never has to guess.
# =============================================================================

from dataclasses import dataclass, field
from typing import Any, Optional, Union


# -----------------------------------------------------------------------------
# SearchRequest — the outgoing query
# -----------------------------------------------------------------------------
@dataclass
class SearchRequest:
    """A normalized documentation-search query.

    package_name, language and namespace are expected to be lowercased
    already (see core.search.build_search_request).
    """

    query: str
    package_name: str
    language: str
    namespace: Optional[str] = None

    def to_payload(self) -> dict[str, str]:
        """Build the JSON body for the API.

        The namespace key is left out entirely when there is no namespace;
        the API must never receive ``null`` or ``""`` for it.
        """
        payload = {
            "query": self.query,
            "package_name": self.package_name,
            "language": self.language,
        }
        if self.namespace:
            payload["namespace"] = self.namespace
        return payload


# -----------------------------------------------------------------------------
# Document — one snippet of library documentation
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class Document:
    """A documentation snippet as returned by the API."""

    link: str
    content: str
    semantic_identifier: str

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "Document":
        return cls(
            link=_as_text(data.get("link")),
            content=_as_text(data.get("content")),
            semantic_identifier=_as_text(data.get("semantic_identifier")),
        )


# -----------------------------------------------------------------------------
# SearchResult — the parsed API response
# -----------------------------------------------------------------------------
@dataclass
class SearchResult:
    """Instructions and documents, both in the order the API sent them."""

    instructions: list[str] = field(default_factory=list)
    documents: list[Document] = field(default_factory=list)

    @classmethod
    def from_payload(cls, data: Any) -> "SearchResult":
        """Interpret a decoded JSON body as a SearchResult.

        Missing or malformed fields become empty lists.  Entries that are
        not documents (non-dicts) or not instructions (non-strings) are
        skipped.
        """
        if not isinstance(data, dict):
            return cls()

        raw_instructions = data.get("instructions")
        raw_documents = data.get("documents")

        instructions = [
            item for item in _as_list(raw_instructions) if isinstance(item, str)
        ]
        documents = [
            Document.from_payload(item)
            for item in _as_list(raw_documents)
            if isinstance(item, dict)
        ]
        return cls(instructions=instructions, documents=documents)


# -----------------------------------------------------------------------------
# Search outcome — success-with-data vs. no-result
# -----------------------------------------------------------------------------
# The API client never returns None.  It returns one of these two variants,
# and callers branch with isinstance().
# -----------------------------------------------------------------------------
@dataclass
class Found:
    """The API answered with a (possibly empty) result."""

    result: SearchResult


@dataclass
class NoResult:
    """The lookup failed; ``reason`` is for logs only, never shown to the host."""

    reason: str


SearchOutcome = Union[Found, NoResult]


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)
