import logging
from pathlib import Path

import pdfplumber
import pdfplumber.page
from pdfminer.pdfdocument import PDFEncryptionError
from pdfminer.psparser import PSException
from pdfplumber.utils.exceptions import PdfminerException

from taxteller.domain import EncryptedStatementError, StatementReadError


TEXT_SUFFIXES = ('.txt',)


def _is_encryption_failure(exc: BaseException) -> bool:
    causes = [*exc.args, exc.__cause__, exc.__context__]
    return any(isinstance(cause, PDFEncryptionError) for cause in causes)


class PDFProcessor:
    @staticmethod
    def process(file: str, logger: logging.Logger) -> str:
        """Plain text of every page in ``file``, pages joined by newlines."""
        logger.info('Processing file %s', file)
        try:
            with pdfplumber.open(file) as pdf:
                # Owner-password-only documents open fine but are still refused
                if pdf.doc.encryption is not None:
                    raise EncryptedStatementError(file)
                pages = []
                for page in pdf.pages:
                    logger.debug('Extracting page %d', page.page_number)
                    pages.append(PDFProcessor.extract_text(page))
        except PDFEncryptionError as e:
            raise EncryptedStatementError(file) from e
        except (PdfminerException, PSException) as e:
            if _is_encryption_failure(e):
                raise EncryptedStatementError(file) from e
            raise StatementReadError(file, 'not a readable PDF') from e
        except OSError as e:
            raise StatementReadError(file, e.strerror or str(e)) from e

        logger.info('Extracted %d page(s) from %s', len(pages), file)
        return '\n'.join(pages)

    @staticmethod
    def extract_text(page: pdfplumber.page.Page) -> str:
        return page.extract_text(x_tolerance=1) or ''


def read_statement(file: str, logger: logging.Logger) -> str:
    path = Path(file)
    if path.suffix.lower() in TEXT_SUFFIXES:
        logger.info('Reading text statement %s', file)
        try:
            return path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise StatementReadError(file, str(e)) from e
    return PDFProcessor.process(file, logger)
