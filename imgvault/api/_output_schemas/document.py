"""Output schemas for document commands."""

from pydantic import Field

from ._base import BaseOutputSchema
from ._registry import register_output_schema


class DocumentProcessOutput(BaseOutputSchema):
    """Output schema for document process command."""

    path: str = Field(..., description="Store-relative path of the processed document")
    processed_count: int = Field(..., description="Number of remote images stored and relinked")
    failed_count: int = Field(..., description="Number of remote images that could not be fetched or stored")
    skipped_count: int = Field(..., description="Number of occurrences left untouched (unresolved or not remote)")
    rewrite_map: dict[str, str] = Field(..., description="Mapping from original URL to new store path")
    success: bool = Field(..., description="Whether the batch completed")


class DocumentConvertOutput(BaseOutputSchema):
    """Output schema for document convert command."""

    path: str = Field(..., description="Store-relative path of the converted document")
    style: str = Field(..., description="Target link style")
    converted_count: int = Field(..., description="Number of links rewritten to the target style")
    success: bool = Field(..., description="Whether conversion completed")


class DocumentPreviewOutput(BaseOutputSchema):
    """Output schema for document preview command."""

    path: str = Field(..., description="Store-relative path of the previewed document")
    style: str = Field(..., description="Link style used for rendering")
    content: str = Field(..., description="Rewritten document text (not persisted)")
    changed: bool = Field(..., description="Whether the rewrite changed the text")
    success: bool = Field(..., description="Whether the preview was produced")


class DocumentPasteOutput(BaseOutputSchema):
    """Output schema for document paste command."""

    path: str = Field(..., description="Store-relative path of the document the image was pasted into")
    attachment_path: str = Field(..., description="Store path of the stored image")
    link: str = Field(..., description="Rendered link to insert into the document")
    success: bool = Field(..., description="Whether the image was stored")


class DocumentPasteUrlOutput(BaseOutputSchema):
    """Output schema for document paste-url command."""

    selection: str = Field(..., description="Selected text the URL was pasted over")
    link: str = Field(..., description="Link replacing the selection, empty when the paste is left alone")
    success: bool = Field(..., description="Whether a link was built")


register_output_schema("document", "process", DocumentProcessOutput)
register_output_schema("document", "convert", DocumentConvertOutput)
register_output_schema("document", "preview", DocumentPreviewOutput)
register_output_schema("document", "paste", DocumentPasteOutput)
register_output_schema("document", "paste_url", DocumentPasteUrlOutput)
