"""Constants for the document store (private)."""

# Files the host treats as documents rather than attachments
MARKDOWN_EXTENSION = "md"
NODE_GRAPH_EXTENSION = "canvas"
DOCUMENT_EXTENSIONS = frozenset({MARKDOWN_EXTENSION, NODE_GRAPH_EXTENSION, "base"})

# Store-relative folder used by trash()
TRASH_DIR = ".trash"
