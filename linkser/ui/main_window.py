"""Main application window for Linkser."""

import html
import logging
import sqlite3
from pathlib import Path
from typing import Optional

from PyQt6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QSplitter,
    QListWidget,
    QListWidgetItem,
    QLineEdit,
    QLabel,
    QStatusBar,
    QMessageBox,
    QFileDialog,
    QApplication,
    QPushButton,
    QFrame,
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction, QColor

from ..models.app_state import AppState
from ..models.errors import LinkError
from ..models.storage import get_storage
from ..services.state_service import SnapshotError, StateService

logger = logging.getLogger(__name__)

SELECTED_COLOR = QColor(255, 0, 0)  # Red
HINT_STYLE = "color: gray;"


class MainWindow(QMainWindow):
    """Main application window.

    Every handler mutates self.state and then calls refresh_view(), which
    redraws all widgets from the state.
    """

    def __init__(self, state_service: Optional[StateService] = None):
        super().__init__()
        self.state_service = state_service or StateService(get_storage())
        self.state = self.state_service.load_state()

        # Label entry row is only shown while editing the selected link
        self.editing_labels = False

        self.setup_ui()
        self.refresh_view()

    def setup_ui(self):
        """Set up the user interface."""
        self.setWindowTitle("Linkser")
        self.setMinimumSize(800, 480)

        central_widget = QWidget()
        self.setCentralWidget(central_widget)
        main_layout = QVBoxLayout(central_widget)
        main_layout.setContentsMargins(10, 10, 10, 10)

        # Left side panel and detail panel
        main_splitter = QSplitter(Qt.Orientation.Horizontal)
        main_splitter.addWidget(self._create_side_panel())
        main_splitter.addWidget(self._create_detail_panel())
        main_splitter.setSizes([300, 500])
        main_layout.addWidget(main_splitter)

        # Status bar
        self.status_bar = QStatusBar()
        self.setStatusBar(self.status_bar)

        self.create_menu_bar()

    def _create_side_panel(self) -> QWidget:
        """Create the add-link form and the link list."""
        panel = QWidget()
        panel.setMinimumWidth(220)
        layout = QVBoxLayout(panel)
        layout.setContentsMargins(5, 5, 5, 5)

        layout.addWidget(QLabel("<h3>Add Link</h3>"))

        input_layout = QHBoxLayout()
        self.link_input = QLineEdit()
        self.link_input.setPlaceholderText("https://...")
        self.link_input.textChanged.connect(self.on_link_input_changed)
        self.link_input.returnPressed.connect(self.on_link_submitted)
        input_layout.addWidget(self.link_input)

        self.add_link_btn = QPushButton("+")
        self.add_link_btn.setFixedWidth(32)
        self.add_link_btn.clicked.connect(self.on_link_submitted)
        input_layout.addWidget(self.add_link_btn)
        layout.addLayout(input_layout)

        separator = QFrame()
        separator.setFrameShape(QFrame.Shape.HLine)
        separator.setFrameShadow(QFrame.Shadow.Sunken)
        layout.addWidget(separator)

        self.links_heading = QLabel()
        layout.addWidget(self.links_heading)

        self.link_list = QListWidget()
        self.link_list.itemClicked.connect(self.on_link_clicked)
        layout.addWidget(self.link_list, 1)

        self.empty_hint_label = QLabel("Add a link to the list.")
        self.empty_hint_label.setStyleSheet(HINT_STYLE)
        layout.addWidget(self.empty_hint_label)
        layout.addStretch()

        return panel

    def _create_detail_panel(self) -> QWidget:
        """Create the panel showing the selected link."""
        panel = QWidget()
        layout = QVBoxLayout(panel)
        layout.setContentsMargins(5, 5, 5, 5)

        self.no_selection_label = QLabel("Select a link to display details.")
        self.no_selection_label.setStyleSheet(HINT_STYLE)
        layout.addWidget(self.no_selection_label)

        self.detail_widget = QWidget()
        detail_layout = QVBoxLayout(self.detail_widget)
        detail_layout.setContentsMargins(0, 0, 0, 0)

        self.url_link_label = QLabel()
        self.url_link_label.setWordWrap(True)
        self.url_link_label.setOpenExternalLinks(True)
        self.url_link_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextBrowserInteraction)
        detail_layout.addWidget(self.url_link_label)

        self.labels_label = QLabel()
        self.labels_label.setWordWrap(True)
        detail_layout.addWidget(self.labels_label)

        # Label entry, shown after pressing Edit
        self.label_entry_widget = QWidget()
        label_entry_layout = QHBoxLayout(self.label_entry_widget)
        label_entry_layout.setContentsMargins(0, 0, 0, 0)
        self.label_input = QLineEdit()
        self.label_input.setPlaceholderText("New label")
        self.label_input.textChanged.connect(self.on_label_input_changed)
        self.label_input.returnPressed.connect(self.on_label_submitted)
        label_entry_layout.addWidget(self.label_input)
        self.add_label_btn = QPushButton("Add Label")
        self.add_label_btn.clicked.connect(self.on_label_submitted)
        label_entry_layout.addWidget(self.add_label_btn)
        detail_layout.addWidget(self.label_entry_widget)

        detail_layout.addStretch()

        # Actions along the bottom
        button_layout = QHBoxLayout()
        self.copy_btn = QPushButton("Copy")
        self.copy_btn.setToolTip("Copy link to clipboard")
        self.copy_btn.clicked.connect(self.on_copy_clicked)
        button_layout.addWidget(self.copy_btn)

        self.edit_btn = QPushButton("Edit")
        self.edit_btn.setToolTip("Add labels to this link")
        self.edit_btn.setCheckable(True)
        self.edit_btn.clicked.connect(self.on_edit_clicked)
        button_layout.addWidget(self.edit_btn)

        self.delete_btn = QPushButton("Delete")
        self.delete_btn.setToolTip("Remove link from the list")
        self.delete_btn.clicked.connect(self.on_delete_clicked)
        button_layout.addWidget(self.delete_btn)
        button_layout.addStretch()
        detail_layout.addLayout(button_layout)

        layout.addWidget(self.detail_widget, 1)
        layout.addStretch()

        return panel

    def create_menu_bar(self):
        """Create the menu bar."""
        menu_bar = self.menuBar()

        # File menu
        file_menu = menu_bar.addMenu("&File")

        load_action = QAction("&Load...", self)
        load_action.setShortcut("Ctrl+O")
        load_action.triggered.connect(self.show_load_dialog)
        file_menu.addAction(load_action)

        save_as_action = QAction("Save &As...", self)
        save_as_action.setShortcut("Ctrl+Shift+S")
        save_as_action.triggered.connect(self.show_save_as_dialog)
        file_menu.addAction(save_as_action)

        file_menu.addSeparator()

        exit_action = QAction("E&xit", self)
        exit_action.setShortcut("Alt+F4")
        exit_action.triggered.connect(self.close)
        file_menu.addAction(exit_action)

        # Help menu
        help_menu = menu_bar.addMenu("&Help")

        about_action = QAction("&About", self)
        about_action.triggered.connect(self.show_about)
        help_menu.addAction(about_action)

    def refresh_view(self):
        """Redraw every widget from the current state."""
        self._refresh_inputs()
        self._refresh_link_list()
        self._refresh_detail_panel()

    def _refresh_inputs(self):
        """Sync the text inputs and the add button with the state buffers."""
        if self.link_input.text() != self.state.link_input:
            self.link_input.setText(self.state.link_input)
        if self.label_input.text() != self.state.label_input:
            self.label_input.setText(self.state.label_input)

        has_text = bool(self.state.link_input)
        self.add_link_btn.setEnabled(has_text)
        if has_text:
            self.add_link_btn.setToolTip("Save link to link list")
        else:
            self.add_link_btn.setToolTip("Type link before adding to list")

    def _refresh_link_list(self):
        """Sync the link list, rebuilding it only when the URLs changed."""
        urls = self.state.registry.urls()
        shown = [self.link_list.item(i).text() for i in range(self.link_list.count())]

        if urls != shown:
            self.link_list.clear()
            for url in urls:
                item = QListWidgetItem(url)
                item.setData(Qt.ItemDataRole.UserRole, url)
                item.setToolTip(url)
                self.link_list.addItem(item)

        default_color = self.link_list.palette().text().color()
        for i in range(self.link_list.count()):
            item = self.link_list.item(i)
            if item.text() == self.state.selected:
                item.setForeground(SELECTED_COLOR)
            else:
                item.setForeground(default_color)

        has_links = len(self.state.registry) > 0
        self.links_heading.setText(f"<h3>Links ({len(urls)}):</h3>")
        self.links_heading.setVisible(has_links)
        self.link_list.setVisible(has_links)
        self.empty_hint_label.setVisible(not has_links)

    def _refresh_detail_panel(self):
        """Show the selected link or the selection hint."""
        link = self.state.registry.selected_link()
        if link is None:
            self.editing_labels = False
            self.no_selection_label.setVisible(True)
            self.detail_widget.setVisible(False)
            return

        self.no_selection_label.setVisible(False)
        self.detail_widget.setVisible(True)

        escaped = html.escape(link.url)
        self.url_link_label.setText(f'<a href="{escaped}">{escaped}</a>')
        self.url_link_label.setToolTip(link.url)

        if link.labels:
            self.labels_label.setText(
                "Labels: " + ", ".join(html.escape(label) for label in link.labels)
            )
            self.labels_label.setStyleSheet("")
        else:
            self.labels_label.setText("No labels")
            self.labels_label.setStyleSheet(HINT_STYLE)

        self.label_entry_widget.setVisible(self.editing_labels)
        self.edit_btn.setChecked(self.editing_labels)
        self.add_label_btn.setEnabled(bool(self.state.label_input.strip()))

    def on_link_input_changed(self, text: str):
        """Keep the URL buffer in step with the line edit."""
        self.state.link_input = text
        self._refresh_inputs()

    def on_label_input_changed(self, text: str):
        """Keep the label buffer in step with the line edit."""
        self.state.label_input = text
        self.add_label_btn.setEnabled(bool(text.strip()))

    def on_link_submitted(self):
        """Handle the + button or Enter in the URL input."""
        try:
            link = self.state.submit_link()
        except LinkError as e:
            self.status_bar.showMessage(str(e), 5000)
        else:
            self.status_bar.showMessage(f"Added {link.url}", 3000)
        self.refresh_view()
        self.link_input.setFocus()

    def on_label_submitted(self):
        """Handle the Add Label button or Enter in the label input."""
        try:
            link = self.state.submit_label()
        except LinkError as e:
            self.status_bar.showMessage(str(e), 5000)
        else:
            self.status_bar.showMessage(f"Labeled {link.url}", 3000)
        self.refresh_view()
        self.label_input.setFocus()

    def on_link_clicked(self, item: QListWidgetItem):
        """Handle link list click - select that link."""
        url = item.data(Qt.ItemDataRole.UserRole)
        try:
            self.state.registry.select(url)
        except LinkError as e:
            self.status_bar.showMessage(str(e), 5000)
        self.editing_labels = False
        self.refresh_view()

    def on_copy_clicked(self):
        """Copy the selected URL to the clipboard."""
        link = self.state.registry.selected_link()
        if link is None:
            return
        QApplication.clipboard().setText(link.url)
        self.status_bar.showMessage(f"Copied {link.url}", 3000)

    def on_edit_clicked(self):
        """Toggle the label entry for the selected link."""
        self.editing_labels = not self.editing_labels
        self.refresh_view()
        if self.editing_labels:
            self.label_input.setFocus()

    def on_delete_clicked(self):
        """Delete the selected link."""
        try:
            link = self.state.delete_selected()
        except LinkError as e:
            self.status_bar.showMessage(str(e), 5000)
        else:
            self.status_bar.showMessage(f"Deleted {link.url}", 3000)
        self.editing_labels = False
        self.refresh_view()

    def load_snapshot(self, path: Path) -> bool:
        """Replace the current state with a snapshot file.

        Returns:
            True if the snapshot was loaded
        """
        try:
            self.state = self.state_service.read_snapshot_file(path)
        except SnapshotError as e:
            logger.warning(str(e))
            QMessageBox.warning(self, "Load Failed", str(e))
            return False

        self.editing_labels = False
        self.refresh_view()
        self.status_bar.showMessage(
            f"Loaded {len(self.state.registry)} links from {path.name}", 3000
        )
        return True

    def save_snapshot(self, path: Path) -> bool:
        """Write the current state to a snapshot file."""
        try:
            self.state_service.write_snapshot_file(path, self.state)
        except SnapshotError as e:
            logger.warning(str(e))
            QMessageBox.warning(self, "Save Failed", str(e))
            return False

        self.status_bar.showMessage(f"Saved to {path.name}", 3000)
        return True

    def show_load_dialog(self):
        """Ask for a snapshot file and load it."""
        file_name, _ = QFileDialog.getOpenFileName(
            self, "Load Links", "", "JSON Files (*.json);;All Files (*)"
        )
        if file_name:
            self.load_snapshot(Path(file_name))

    def show_save_as_dialog(self):
        """Ask for a file name and save a snapshot to it."""
        file_name, _ = QFileDialog.getSaveFileName(
            self, "Save Links", "links.json", "JSON Files (*.json);;All Files (*)"
        )
        if file_name:
            self.save_snapshot(Path(file_name))

    def show_about(self):
        """Show about dialog."""
        QMessageBox.about(
            self,
            "About Linkser",
            "Linkser v0.1\n\n"
            "A small desktop application to keep a list of links.\n\n"
            "Features:\n"
            "- Add links and attach labels to them\n"
            "- Copy links or open them in your default browser\n"
            "- Links are saved when the window closes"
        )

    def closeEvent(self, event):
        """Save state before the window closes."""
        try:
            self.state_service.save_state(self.state)
        except sqlite3.Error:
            logger.exception("Failed to save state on close")
        super().closeEvent(event)
