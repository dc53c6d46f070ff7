import PyPDF2
import pytest

from taxteller.domain import EncryptedStatementError, StatementReadError
from taxteller.domain.services import pdfprocessor
from taxteller.domain.services.pdfprocessor import PDFProcessor, read_statement


def test_text_statement_is_read_verbatim(tmp_path, logger):
    path = tmp_path / 'statement.txt'
    path.write_text('Opening Balance $10.00\n01/07/23 Deposit 1.00 11.00\n', encoding='utf-8')
    assert read_statement(str(path), logger) == 'Opening Balance $10.00\n01/07/23 Deposit 1.00 11.00\n'


def test_missing_file_is_a_read_failure(tmp_path, logger):
    with pytest.raises(StatementReadError):
        read_statement(str(tmp_path / 'missing.pdf'), logger)
    with pytest.raises(StatementReadError):
        read_statement(str(tmp_path / 'missing.txt'), logger)


def test_garbage_pdf_is_a_read_failure(tmp_path, logger):
    path = tmp_path / 'statement.pdf'
    path.write_bytes(b'this is not a pdf')
    with pytest.raises(StatementReadError) as excinfo:
        PDFProcessor.process(str(path), logger)
    assert not isinstance(excinfo.value, EncryptedStatementError)
    assert excinfo.value.file == str(path)


def encrypted_pdf(path, user_password):
    writer = PyPDF2.PdfWriter()
    writer.add_blank_page(width=200, height=200)
    writer.encrypt(user_password=user_password, owner_password='owner', use_128bit=True)
    with open(path, 'wb') as f:
        writer.write(f)
    return str(path)


def test_password_protected_pdf_is_reported_distinctly(tmp_path, logger):
    path = encrypted_pdf(tmp_path / 'locked.pdf', 'secret')
    with pytest.raises(EncryptedStatementError):
        PDFProcessor.process(path, logger)


def test_owner_password_only_pdf_is_refused(tmp_path, logger):
    path = encrypted_pdf(tmp_path / 'restricted.pdf', '')
    with pytest.raises(EncryptedStatementError) as excinfo:
        read_statement(path, logger)
    assert excinfo.value.file == path


class FakePage:
    def __init__(self, number, text):
        self.page_number = number
        self.text = text

    def extract_text(self, **kwargs):
        return self.text


class FakeDocument:
    encryption = None


class FakePDF:
    def __init__(self, pages):
        self.pages = pages
        self.doc = FakeDocument()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


def test_pages_are_joined_with_newlines(monkeypatch, logger):
    pdf = FakePDF([FakePage(1, 'Opening Balance $5.00'), FakePage(2, None), FakePage(3, '01/07/23 Deposit 1.00 6.00')])
    monkeypatch.setattr(pdfprocessor.pdfplumber, 'open', lambda file: pdf)
    assert PDFProcessor.process('statement.pdf', logger) == 'Opening Balance $5.00\n\n01/07/23 Deposit 1.00 6.00'
