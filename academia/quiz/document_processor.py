"""
Document processing utilities for quiz generation.
Extracts text from stored course documents.
"""
import logging
import os
from typing import Callable, Dict, Optional

import pdfplumber
import PyPDF2
from docx import Document
from flask import current_app, has_app_context

from academia.common.file_utils import get_file_extension


def _logger():
    # Extraction also runs from scripts and batch jobs with no app context
    return current_app.logger if has_app_context() else logging.getLogger(__name__)


class DocumentProcessor:
    """Service for extracting plain text from stored documents."""

    _handlers: Dict[str, Callable[[str], str]] = {}

    @classmethod
    def register_handler(cls, extension: str, handler: Callable[[str], str]) -> None:
        """
        Register (or replace) the text extractor for a file extension.

        Args:
            extension: File extension with or without the leading dot
            handler: Callable taking a file path and returning its text
        """
        ext = extension.lower()
        if not ext.startswith('.'):
            ext = f'.{ext}'
        cls._handlers[ext] = handler

    @classmethod
    def supported_extensions(cls) -> set:
        return set(cls._handlers)

    @classmethod
    def extract_text(cls, file_path: str, file_type: Optional[str] = None) -> str:
        """
        Extract text from a document file.

        Args:
            file_path: Full path to the file
            file_type: Optional extension override (pdf, docx, txt)

        Returns:
            Extracted text, or an empty string if the file is missing,
            unsupported or cannot be read
        """
        try:
            if not file_path or not os.path.isfile(file_path):
                _logger().warning(f"File not found for text extraction: {file_path}")
                return ""

            ext = get_file_extension(f"file.{file_type.lstrip('.')}" if file_type else file_path)
            handler = cls._handlers.get(ext)
            if handler is None:
                _logger().warning(f"Unsupported file type for text extraction: {ext or 'none'} ({file_path})")
                return ""

            return (handler(file_path) or "").strip()
        except Exception as e:
            _logger().error(f"Error extracting text from {file_path}: {str(e)}")
            return ""

    @staticmethod
    def _extract_from_pdf(file_path: str) -> str:
        """Extract text from PDF file."""
        # Try pdfplumber first (better text extraction)
        try:
            text = ""
            with pdfplumber.open(file_path) as pdf:
                for page_num, page in enumerate(pdf.pages, 1):
                    try:
                        page_text = page.extract_text()
                        if page_text:
                            text += page_text + "\n"
                    except Exception as e:
                        _logger().warning(f"Error extracting text from PDF page {page_num}: {str(e)}")
                        continue
            if text.strip():
                _logger().info(f"Successfully extracted {len(text)} characters from PDF using pdfplumber")
                return text.strip()
        except Exception as e:
            _logger().warning(f"pdfplumber extraction failed: {str(e)}, trying PyPDF2")

        # Fallback to PyPDF2
        with open(file_path, 'rb') as file:
            pdf_reader = PyPDF2.PdfReader(file)

            # Check if PDF is encrypted
            if pdf_reader.is_encrypted:
                _logger().warning("PDF is encrypted, attempting to decrypt with empty password")
                pdf_reader.decrypt("")

            text = ""
            for page_num, page in enumerate(pdf_reader.pages, 1):
                try:
                    page_text = page.extract_text()
                    if page_text:
                        text += page_text + "\n"
                except Exception as e:
                    _logger().warning(f"Error extracting text from PDF page {page_num}: {str(e)}")
                    continue

        if not text.strip():
            _logger().warning("PDF extraction returned empty text - PDF may be image-based (scanned)")
            return ""
        _logger().info(f"Successfully extracted {len(text)} characters from PDF using PyPDF2")
        return text.strip()

    @staticmethod
    def _extract_from_docx(file_path: str) -> str:
        """Extract text from DOCX file."""
        doc = Document(file_path)
        return "\n".join(paragraph.text for paragraph in doc.paragraphs).strip()

    @staticmethod
    def _extract_from_txt(file_path: str) -> str:
        """Extract text from TXT file."""
        try:
            with open(file_path, 'r', encoding='utf-8') as file:
                return file.read().strip()
        except UnicodeDecodeError:
            # Try with different encoding
            with open(file_path, 'r', encoding='latin-1') as file:
                return file.read().strip()


DocumentProcessor.register_handler('.pdf', DocumentProcessor._extract_from_pdf)
DocumentProcessor.register_handler('.docx', DocumentProcessor._extract_from_docx)
DocumentProcessor.register_handler('.txt', DocumentProcessor._extract_from_txt)
