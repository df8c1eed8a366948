"""
Utility to extract text content from uploaded CV / JD documents.
Supports: .pdf, .docx, .md, .txt

Uploads without a recognizable extension are treated as PDF, which is what
the HR portal sends.
"""
import io
import logging
from pathlib import Path
from typing import Optional, Union

import PyPDF2
from docx import Document

logger = logging.getLogger(__name__)


class DocumentExtractionError(Exception):
    """Raised when a document cannot be parsed into text."""


class DocumentExtractor:
    """Extract text content from various document formats"""

    @staticmethod
    def extract_text(file_content: bytes, filename: Optional[str] = None) -> str:
        """
        Extract text from a file based on its extension.

        Args:
            file_content: Raw bytes of the file
            filename: Original file name (used to determine extension)

        Returns:
            Extracted text content

        Raises:
            DocumentExtractionError: If the format is unsupported or parsing fails
        """
        extension = Path(filename).suffix.lower() if filename else ""

        try:
            if extension in ['.md', '.txt']:
                return DocumentExtractor._extract_text_plain(file_content)
            if extension == '.docx':
                return DocumentExtractor._extract_text_docx(file_content)
            if extension in ['.pdf', '']:
                return DocumentExtractor._extract_text_pdf(file_content)
        except Exception as e:
            logger.error(f"Text extraction failed for {filename or '<blob>'}: {e}")
            raise DocumentExtractionError(f"Failed to extract text from {filename or 'document'}") from e

        raise DocumentExtractionError(f"Unsupported file format: {extension}")

    @staticmethod
    def extract_file(path: Union[str, Path], filename: Optional[str] = None) -> str:
        """
        Extract text from a file on disk (multipart scratch uploads).

        Args:
            path: Location of the stored upload
            filename: Original client file name, if known
        """
        path = Path(path)
        return DocumentExtractor.extract_text(path.read_bytes(), filename or path.name)

    @staticmethod
    def _extract_text_plain(file_content: bytes) -> str:
        """Extract text from plain text files (.md, .txt)"""
        try:
            # Try UTF-8 first
            return file_content.decode('utf-8')
        except UnicodeDecodeError:
            # Fallback to latin-1
            return file_content.decode('latin-1')

    @staticmethod
    def _extract_text_docx(file_content: bytes) -> str:
        """Extract text from Word documents (.docx)"""
        doc = Document(io.BytesIO(file_content))
        paragraphs = [paragraph.text for paragraph in doc.paragraphs]
        return '\n'.join(paragraphs)

    @staticmethod
    def _extract_text_pdf(file_content: bytes) -> str:
        """Extract text from PDF files (.pdf)"""
        pdf_reader = PyPDF2.PdfReader(io.BytesIO(file_content))
        text_parts = []

        for page in pdf_reader.pages:
            text_parts.append(page.extract_text() or "")

        return '\n'.join(text_parts)
