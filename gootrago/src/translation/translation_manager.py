import logging
from typing import Any, Dict, List, Optional, Sequence

from ..files import file_handler
from ..files.file_handler import Row
from ..utils.config import TranslationSettings
from ..utils.errors import DispatcherError, TranslationLengthMismatch
from ..utils.sheet_index import SheetIndex
from ..utils.ui import ConsoleUIManager
from .translators import Translator

logger = logging.getLogger(__name__)


class TranslationManager:
    def __init__(self, settings: TranslationSettings, translator: Translator,
                 ui: Optional[ConsoleUIManager] = None):
        """Initialize Translation Manager.

        Args:
            settings: Resolved options of this invocation
            translator: Basic or Advanced translation client
            ui: Console output, a quiet one is created when omitted
        """
        self.settings = settings
        self.translator = translator
        self.ui = ui or ConsoleUIManager(quiet=True)

        self.stats: Dict[str, Any] = {
            'rows': 0,
            'cells': 0,
            'requests': 0,
        }

    def _translate_batch(self, texts: List[str], context: str) -> List[str]:
        try:
            translations = self.translator.translate(texts)
        except DispatcherError as e:
            raise DispatcherError(f"failed to translate {context}: {e}") from e

        # The translator checks this too, but stubs and subclasses may not
        if len(translations) != len(texts):
            raise TranslationLengthMismatch(len(texts), len(translations))

        self.stats['requests'] += 1
        self.stats['cells'] += len(texts)
        return translations

    def translate_rows(self, rows: Sequence[Row], indices: Sequence[int]) -> List[Row]:
        """Translate every row, either whole or only the selected columns.

        Args:
            rows: Table rows, left untouched
            indices: 1-based column indices; empty means "the whole row"

        Returns:
            New rows with translated values written back where they came
            from. Batch position k goes back to column indices[k].
        """
        result: List[Row] = []
        for row_number, row in enumerate(rows, start=1):
            new_row = list(row)
            context = f"row {row_number}"
            if not indices:
                new_row = self._translate_batch(new_row, context)
            else:
                batch = [new_row[index - 1] for index in indices]
                translations = self._translate_batch(batch, context)
                for index, value in zip(indices, translations):
                    new_row[index - 1] = value
            result.append(new_row)
            self.stats['rows'] += 1
            logger.debug(f"Translated row {row_number}/{len(rows)}")
        return result

    def translate_text_file(self) -> str:
        """Translate the whole input file as a single string."""
        settings = self.settings
        content = file_handler.read_text(settings.input_file)
        logger.info(f"Read {len(content)} characters from {settings.input_file}")

        with self.ui.progress():
            translations = self._translate_batch([content], "text")
        self.stats['rows'] += 1

        file_handler.write_lines(settings.output_file, translations)
        self._report()
        return translations[0]

    def translate_csv_file(self) -> List[Row]:
        """Translate a CSV file, whole rows or the configured columns."""
        settings = self.settings
        header, rows = file_handler.read_csv(
            settings.input_file,
            delimiter=settings.csv_delimiter,
            comment=settings.csv_comment,
            has_header=settings.has_header,
        )

        width_row = header if header is not None else (rows[0] if rows else [])
        indices = SheetIndex.decode_references(settings.columns, len(width_row))
        if indices:
            columns = ", ".join(SheetIndex.describe(i) for i in indices)
            logger.info(f"Translating columns {columns} of {len(rows)} rows")
        else:
            logger.info(f"Translating all columns of {len(rows)} rows")

        with self.ui.progress():
            translated = self.translate_rows(rows, indices)

        file_handler.write_csv(settings.output_file, translated, header=header,
                               delimiter=settings.csv_delimiter)
        self._report()
        return translated

    def _report(self) -> None:
        settings = self.settings
        logger.info(
            f"Statistics: {self.stats['rows']} rows, {self.stats['cells']} strings, "
            f"{self.stats['requests']} requests"
        )
        self.ui.success(
            f"Translated {settings.input_file} to {settings.output_file} "
            f"using {settings.api_name} API"
        )
        detected = self.translator.detected_source_language
        if settings.auto_detect and detected:
            self.ui.info(f"Detected source language: {detected}, Target language: {settings.target_lang}")
        else:
            self.ui.info(f"Source language: {settings.source_lang}, Target language: {settings.target_lang}")
