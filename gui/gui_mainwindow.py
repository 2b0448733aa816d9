"""
gui_mainwindow.py - GUI Main Window

One operation panel (mode, directory, texts, extensions, options) with
output and log panes.
"""

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QGridLayout,
    QLabel, QLineEdit, QPushButton, QCheckBox, QComboBox,
    QPlainTextEdit, QProgressBar, QFileDialog, QMessageBox,
    QGroupBox, QSplitter
)
from PySide6.QtCore import Qt, Slot

from core import Mode, RunConfig, ConfigError, normalize_extensions
from .gui_workers import OperationWorker, QtLogHandler

# Options each mode understands
MODE_OPTIONS = {
    Mode.RENAME: {"dry_run"},
    Mode.REPLACE: {"dry_run", "backup", "ignore_case"},
    Mode.SEARCH: {"filenames_only", "case_sensitive", "regex"},
    Mode.LIST: set(),
    Mode.UNDO: {"dry_run"},
    Mode.DELETE: {"dry_run", "force"},
}


class OperationPanel(QWidget):
    """Form for one operation plus its output"""

    def __init__(self, parent=None):
        super().__init__(parent)
        self.worker: Optional[OperationWorker] = None

        self._init_ui()
        self._on_mode_changed()

    def _init_ui(self):
        layout = QVBoxLayout(self)

        # Settings group
        settings_group = QGroupBox("Settings")
        settings_layout = QGridLayout(settings_group)

        settings_layout.addWidget(QLabel("Mode:"), 0, 0)
        self.mode_combo = QComboBox()
        for mode in Mode:
            self.mode_combo.addItem(mode.value.capitalize(), mode)
        self.mode_combo.currentIndexChanged.connect(self._on_mode_changed)
        settings_layout.addWidget(self.mode_combo, 0, 1, 1, 2)

        # Directory selection
        settings_layout.addWidget(QLabel("Directory:"), 1, 0)
        self.dir_edit = QLineEdit()
        self.dir_edit.setPlaceholderText("Select root directory...")
        settings_layout.addWidget(self.dir_edit, 1, 1)
        self.browse_btn = QPushButton("Browse...")
        self.browse_btn.clicked.connect(self._browse_directory)
        settings_layout.addWidget(self.browse_btn, 1, 2)

        settings_layout.addWidget(QLabel("Find:"), 2, 0)
        self.old_edit = QLineEdit()
        settings_layout.addWidget(self.old_edit, 2, 1, 1, 2)

        settings_layout.addWidget(QLabel("Replace with:"), 3, 0)
        self.new_edit = QLineEdit()
        self.new_edit.setPlaceholderText("Leave empty to delete the text")
        settings_layout.addWidget(self.new_edit, 3, 1, 1, 2)

        settings_layout.addWidget(QLabel("Extensions:"), 4, 0)
        self.ext_edit = QLineEdit()
        self.ext_edit.setPlaceholderText("e.g. py txt md (leave empty for all files)")
        settings_layout.addWidget(self.ext_edit, 4, 1, 1, 2)

        # Options
        options_layout = QHBoxLayout()
        self.option_checks = {
            "dry_run": QCheckBox("Dry Run"),
            "backup": QCheckBox("Backup (.bak)"),
            "ignore_case": QCheckBox("Ignore Case"),
            "filenames_only": QCheckBox("File Names Only"),
            "case_sensitive": QCheckBox("Case Sensitive"),
            "regex": QCheckBox("Regex"),
            "force": QCheckBox("Force Delete"),
        }
        for check in self.option_checks.values():
            options_layout.addWidget(check)
        options_layout.addStretch()
        settings_layout.addLayout(options_layout, 5, 0, 1, 3)

        layout.addWidget(settings_group)

        # Output and log panes
        splitter = QSplitter(Qt.Orientation.Vertical)
        self.output_view = QPlainTextEdit()
        self.output_view.setReadOnly(True)
        self.output_view.setPlaceholderText("Output")
        splitter.addWidget(self.output_view)
        self.log_view = QPlainTextEdit()
        self.log_view.setReadOnly(True)
        self.log_view.setPlaceholderText("Warnings")
        splitter.addWidget(self.log_view)
        splitter.setSizes([400, 120])
        layout.addWidget(splitter, 1)

        # Progress and execution
        bottom_layout = QHBoxLayout()

        self.progress_bar = QProgressBar()
        self.progress_bar.setVisible(False)
        bottom_layout.addWidget(self.progress_bar, 1)

        self.run_btn = QPushButton("Run")
        self.run_btn.clicked.connect(self._do_run)
        self.run_btn.setStyleSheet("QPushButton { background-color: #4CAF50; color: white; font-weight: bold; padding: 8px 16px; }")
        bottom_layout.addWidget(self.run_btn)

        layout.addLayout(bottom_layout)

        # Status label
        self.status_label = QLabel("")
        layout.addWidget(self.status_label)

    @property
    def mode(self) -> Mode:
        return self.mode_combo.currentData()

    @Slot()
    def _on_mode_changed(self):
        """Enable only the fields and options the mode uses"""
        mode = self.mode
        allowed = MODE_OPTIONS[mode]
        for name, check in self.option_checks.items():
            check.setEnabled(name in allowed)
            if name not in allowed:
                check.setChecked(False)

        self.old_edit.setEnabled(mode is not Mode.UNDO)
        self.new_edit.setEnabled(mode in (Mode.RENAME, Mode.REPLACE))
        self.ext_edit.setEnabled(mode is not Mode.RENAME)

    def _browse_directory(self):
        """Browse and select directory"""
        directory = QFileDialog.getExistingDirectory(self, "Select Directory")
        if directory:
            self.dir_edit.setText(directory)

    def _checked(self, name: str) -> bool:
        check = self.option_checks[name]
        return check.isEnabled() and check.isChecked()

    def _build_config(self) -> RunConfig:
        mode = self.mode
        return RunConfig(
            mode=mode,
            root=Path(self.dir_edit.text().strip()).expanduser(),
            old=self.old_edit.text() if mode is not Mode.UNDO else "",
            new=self.new_edit.text() if mode in (Mode.RENAME, Mode.REPLACE) else None,
            extensions=normalize_extensions(self.ext_edit.text().split()),
            dry_run=self._checked("dry_run"),
            backup=self._checked("backup"),
            ignore_case_replace=self._checked("ignore_case"),
            filenames_only=self._checked("filenames_only"),
            case_sensitive_search=self._checked("case_sensitive"),
            regex_search=self._checked("regex"),
            force=self._checked("force"),
        ).validate()

    def _confirm(self, config: RunConfig) -> bool:
        """Ask before any run that changes files"""
        if config.dry_run:
            return True
        if config.mode is Mode.DELETE and not config.force:
            return True
        if config.mode in (Mode.SEARCH, Mode.LIST):
            return True

        reply = QMessageBox.question(
            self, "Confirm",
            f"Run {config.mode.value} in {config.root}?\n\nFiles will be modified.",
            QMessageBox.StandardButton.Yes | QMessageBox.StandardButton.No
        )
        return reply == QMessageBox.StandardButton.Yes

    def _do_run(self):
        """Validate the form and start the worker"""
        try:
            config = self._build_config()
        except ConfigError as e:
            QMessageBox.warning(self, "Warning", str(e))
            return

        if not self._confirm(config):
            return

        self.output_view.clear()
        self.log_view.clear()
        self.run_btn.setEnabled(False)
        self.run_btn.setText("Running...")
        self.progress_bar.setVisible(True)
        self.progress_bar.setRange(0, 0)  # Indeterminate progress

        self.worker = OperationWorker(config)
        self.worker.progress.connect(self._on_progress)
        self.worker.finished.connect(self._on_finished)
        self.worker.error.connect(self._on_error)
        self.worker.start()

    def _reset_controls(self):
        self.run_btn.setEnabled(True)
        self.run_btn.setText("Run")
        self.progress_bar.setVisible(False)

    @Slot(str)
    def _on_progress(self, msg: str):
        """One output line"""
        self.output_view.appendPlainText(msg)

    @Slot(str)
    def append_log(self, msg: str):
        self.log_view.appendPlainText(msg)

    @Slot(object)
    def _on_finished(self, result):
        """Operation complete"""
        self._reset_controls()
        if isinstance(result, list):
            summary = f"Found {len(result)} files"
        else:
            summary = result.summary()
        self.output_view.appendPlainText("")
        self.output_view.appendPlainText(summary)
        self.status_label.setText("Complete")

    @Slot(str)
    def _on_error(self, error: str):
        """Operation error"""
        self._reset_controls()
        QMessageBox.critical(self, "Error", f"Operation failed: {error}")


class MainWindow(QMainWindow):
    """Main window"""

    def __init__(self):
        super().__init__()
        self.setWindowTitle("File Kit")
        self.setMinimumSize(900, 600)

        self.panel = OperationPanel()
        self.setCentralWidget(self.panel)

        # Route core warnings into the panel's log pane
        self.log_handler = QtLogHandler(logging.WARNING)
        self.log_handler.emitter.message.connect(self.panel.append_log)
        logging.getLogger().addHandler(self.log_handler)

        # Status bar
        self.statusBar().showMessage("Ready")

    def closeEvent(self, event):
        logging.getLogger().removeHandler(self.log_handler)
        super().closeEvent(event)
