"""
Document parsing task using LangChain document loaders.

Extracts plain text from PDF (PyPDFLoader) and text/markdown (TextLoader)
files.

Dependencies: langchain_community.document_loaders, pypdf
System role: First stage of document ingestion pipeline
"""

from pathlib import Path

from langchain_community.document_loaders import PyPDFLoader, TextLoader
from langchain_core.documents import Document

from docqa.core.exceptions import ParsingError

SUPPORTED_EXTENSIONS = frozenset({".pdf", ".txt", ".md"})


class ParsingTask:
    """Parse supported documents into one text string."""

    def parse(self, file_path: str | Path) -> str:
        """
        Extract the text of a document, pages joined by newlines.

        Args:
            file_path: Path to a .pdf, .txt or .md file

        Returns:
            str: Extracted text

        Raises:
            ParsingError: Missing file, unsupported format, failed or empty extraction
        """
        path = Path(file_path)
        suffix = path.suffix.lower()

        if not path.is_file():
            raise ParsingError(f"File not found: {path}", str(path))

        if suffix not in SUPPORTED_EXTENSIONS:
            raise ParsingError(
                f"Unsupported file format: {path.suffix or '<none>'}. "
                f"Supported: {', '.join(sorted(SUPPORTED_EXTENSIONS))}",
                str(path),
                file_type=suffix or None,
            )

        try:
            documents = self._load(path, suffix)
        except Exception as e:
            raise ParsingError(
                f"Failed to parse document: {e}",
                str(path),
                file_type=suffix,
            ) from e

        text = "\n".join(doc.page_content for doc in documents if doc.page_content)
        if not text.strip():
            raise ParsingError(
                "Document contains no extractable text",
                str(path),
                file_type=suffix,
            )
        return text

    def _load(self, path: Path, suffix: str) -> list[Document]:
        if suffix == ".pdf":
            return PyPDFLoader(str(path)).load()
        return TextLoader(str(path), encoding="utf-8").load()
