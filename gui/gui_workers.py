"""
gui_workers.py - GUI Worker Threads

Provides background execution of long tasks to avoid blocking UI
"""

import logging
from typing import Optional

from PySide6.QtCore import QThread, Signal, QObject

from core import (
    Mode, RunConfig,
    plan_name_rename, execute_rename,
    replace_in_tree, search_tree, list_matching,
    undo_tree, delete_matching,
)


class OperationWorker(QThread):
    """Runs one validated configuration in the background"""

    # Signals
    progress = Signal(str)          # One output line
    finished = Signal(object)       # Operation result
    error = Signal(str)             # Error message

    def __init__(self, config: RunConfig, parent: Optional[QObject] = None):
        super().__init__(parent)
        self.config = config

    def _execute(self):
        config = self.config
        emit = self.progress.emit

        if config.mode is Mode.RENAME:
            plan = plan_name_rename(config.root, config.old, config.new, exclude_dirs=config.exclude_dirs)
            for warning in plan.warnings:
                logging.getLogger(__name__).warning(warning)
            return execute_rename(
                plan,
                dry_run=config.dry_run,
                progress_callback=lambda current, total, msg: emit(msg),
            )

        if config.mode is Mode.REPLACE:
            return replace_in_tree(
                config.root, config.old, config.new,
                extensions=config.extensions,
                case_sensitive=not config.ignore_case_replace,
                backup=config.backup,
                dry_run=config.dry_run,
                exclude_dirs=config.exclude_dirs,
                progress_callback=emit,
            )

        if config.mode is Mode.SEARCH:
            return search_tree(
                config.root, config.old,
                extensions=config.extensions,
                case_sensitive=config.case_sensitive_search,
                regex=config.regex_search,
                filenames_only=config.filenames_only,
                exclude_dirs=config.exclude_dirs,
                match_callback=lambda match: emit(match.format()),
            )

        if config.mode is Mode.LIST:
            files = list_matching(config.root, config.old, config.extensions, config.exclude_dirs)
            for f in files:
                emit(str(f.path))
            return files

        if config.mode is Mode.UNDO:
            return undo_tree(
                config.root,
                extensions=config.extensions,
                dry_run=config.dry_run,
                exclude_dirs=config.exclude_dirs,
                progress_callback=emit,
            )

        if config.mode is Mode.DELETE:
            return delete_matching(
                config.root, config.old,
                extensions=config.extensions,
                force=config.force,
                dry_run=config.dry_run,
                exclude_dirs=config.exclude_dirs,
                progress_callback=emit,
            )

        raise ValueError(f"Unknown mode: {config.mode}")

    def run(self):
        try:
            self.finished.emit(self._execute())
        except Exception as e:
            self.error.emit(str(e))


class LogEmitter(QObject):
    """Carries log lines across threads"""
    message = Signal(str)


class QtLogHandler(logging.Handler):
    """Logging handler forwarding formatted records to a Qt signal"""

    def __init__(self, level: int = logging.INFO):
        super().__init__(level)
        self.emitter = LogEmitter()
        self.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

    def emit(self, record: logging.LogRecord):
        try:
            self.emitter.message.emit(self.format(record))
        except Exception:
            self.handleError(record)
