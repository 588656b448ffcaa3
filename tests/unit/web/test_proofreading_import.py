#!/usr/bin/env python3
"""
Unit tests for the document import endpoint.
Tests the POST /api/proofreading/import endpoint.
"""

import io
import unittest
from unittest.mock import patch, MagicMock

from docx import Document
from fastapi import FastAPI
from fastapi.testclient import TestClient
from pypdf import PdfWriter

DOCX_MIME = 'application/vnd.openxmlformats-officedocument.wordprocessingml.document'


def build_docx() -> bytes:
    doc = Document()
    doc.add_heading("Introduction", level=1)
    doc.add_paragraph("This report looks at quarterly revenue in every region.")
    doc.add_heading("Findings", level=2)
    doc.add_paragraph("Revenue grew steadily across the whole year.")
    buffer = io.BytesIO()
    doc.save(buffer)
    return buffer.getvalue()


def build_blank_pdf() -> bytes:
    writer = PdfWriter()
    writer.add_blank_page(width=612, height=792)
    buffer = io.BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


class TestDocumentImportEndpoint(unittest.TestCase):
    """Unit tests for document import endpoint."""

    def setUp(self):
        from web.backend.routers.proofreading import router, limiter
        from web.backend.exceptions import register_exception_handlers

        # Disable rate limiting for tests
        limiter.enabled = False

        self.app = FastAPI()
        register_exception_handlers(self.app)
        self.app.include_router(router)
        self.client = TestClient(self.app, raise_server_exceptions=False)

    def test_import_docx(self):
        files = {'file': ('report.docx', build_docx(), DOCX_MIME)}

        response = self.client.post('/api/proofreading/import', files=files)

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertTrue(data['ok'])
        self.assertNotIn('text', data)
        self.assertEqual([p['title'] for p in data['pages']], ["Introduction", "Findings"])
        self.assertTrue(data['pages'][0]['content'].startswith("Introduction"))

    def test_import_txt_pages_have_no_title_key(self):
        files = {'file': ('notes.txt', b'Plain text notes for proofreading.', 'text/plain')}

        response = self.client.post('/api/proofreading/import', files=files)

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {
            "ok": True,
            "pages": [{"content": "Plain text notes for proofreading."}]
        })

    @patch('etl.importer.parser.PdfReader')
    def test_import_pdf_includes_text(self, mock_reader):
        first, second = MagicMock(), MagicMock()
        first.extract_text.return_value = "First page of the essay."
        second.extract_text.return_value = "Second page of the essay."
        mock_reader.return_value.pages = [first, second]

        files = {'file': ('essay.pdf', b'%PDF-1.4 fake', 'application/pdf')}
        response = self.client.post('/api/proofreading/import', files=files)

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data['text'], "First page of the essay.\n\nSecond page of the essay.")
        self.assertEqual(
            [p['content'] for p in data['pages']],
            ["First page of the essay.", "Second page of the essay."]
        )

    def test_scanned_pdf_rejected(self):
        files = {'file': ('scan.pdf', build_blank_pdf(), 'application/pdf')}

        response = self.client.post('/api/proofreading/import', files=files)

        self.assertEqual(response.status_code, 400)
        data = response.json()
        self.assertFalse(data['success'])
        self.assertEqual(data['type'], "ScannedDocumentError")
        self.assertIn("appears to be scanned", data['error'])

    def test_corrupt_docx_rejected(self):
        files = {'file': ('broken.docx', b'not really a docx', DOCX_MIME)}

        response = self.client.post('/api/proofreading/import', files=files)

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['type'], "DocumentParseError")

    def test_unsupported_format_rejected(self):
        files = {'file': ('essay.odt', b'content', 'application/octet-stream')}

        response = self.client.post('/api/proofreading/import', files=files)

        self.assertEqual(response.status_code, 400)
        self.assertIn('Unsupported file format', response.json()['error'])

    def test_empty_file_rejected(self):
        files = {'file': ('notes.txt', b'', 'text/plain')}

        response = self.client.post('/api/proofreading/import', files=files)

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], "Empty file")

    @patch('web.backend.routers.proofreading.get_config')
    def test_oversized_file_rejected(self, mock_config):
        cfg = MagicMock()
        cfg.importer.max_upload_bytes = 2 * 1024 * 1024
        mock_config.return_value = cfg

        files = {'file': ('notes.txt', b'a' * (2 * 1024 * 1024 + 1), 'text/plain')}
        response = self.client.post('/api/proofreading/import', files=files)

        self.assertEqual(response.status_code, 413)
        self.assertIn("2MB", response.json()['error'])

    def test_missing_file_field(self):
        response = self.client.post('/api/proofreading/import', data={'other': 'value'})

        self.assertEqual(response.status_code, 422)


if __name__ == '__main__':
    unittest.main()
