# =============================================================================
# core/formatting.py  —  Response Formatter
# =============================================================================
#
# Turns a search outcome into the single text block the host receives.
#
# OUTPUT SHAPE (when documents exist):
#
#   Found the following relevant library documentation:
#
#   Semantic Identifier: <id>
#   Link: <url>
#   Content: <text>
#
#   Semantic Identifier: ...
#   ...
#
#   Instructions:          <- only when the API sent instructions
#   - <instruction>
#   - <instruction>
#
# Documents keep the API's order.  Only the first MAX_DOCUMENTS are shown.
# =============================================================================

from core.models import Document, Found, SearchOutcome

MAX_DOCUMENTS = 10

NOT_FOUND_TEXT = "No documentation found."
RESULTS_HEADER = "Found the following relevant library documentation:"


def format_document(document: Document) -> str:
    """Render one document as three labelled lines."""
    return "\n".join([
        f"Semantic Identifier: {document.semantic_identifier}",
        f"Link: {document.link}",
        f"Content: {document.content}",
    ])


def format_instructions(instructions: list[str]) -> str:
    """Render the instructions section, or "" when there are none."""
    if not instructions:
        return ""
    lines = "\n".join(f"- {instruction}" for instruction in instructions)
    return f"Instructions:\n{lines}\n\n"


def format_search_response(outcome: SearchOutcome) -> str:
    """Build the text returned to the host for one lookup."""
    if not isinstance(outcome, Found) or not outcome.result.documents:
        return NOT_FOUND_TEXT

    result = outcome.result
    formatted_docs = [format_document(doc) for doc in result.documents[:MAX_DOCUMENTS]]

    return (
        f"{RESULTS_HEADER}\n\n"
        + "\n\n".join(formatted_docs)
        + "\n\n"
        + format_instructions(result.instructions)
    )
