"""
Tests for the main window.
"""

import logging
import sqlite3

import pytest
from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QApplication, QMessageBox

from linkser.models.storage import APP_KEY
from linkser.ui.main_window import SELECTED_COLOR, MainWindow


@pytest.fixture
def window(qtbot, state_service):
    window = MainWindow(state_service)
    qtbot.addWidget(window)
    return window


@pytest.fixture
def populated_window(qtbot, state_service, populated_state):
    state_service.save_state(populated_state)
    window = MainWindow(state_service)
    qtbot.addWidget(window)
    return window


def add_link(window, url):
    window.link_input.setText(url)
    window.add_link_btn.click()


class TestAddLink:
    """Test the add-link form."""

    def test_empty_window(self, window):
        assert window.windowTitle() == "Linkser"
        assert not window.empty_hint_label.isHidden()
        assert window.link_list.isHidden()
        assert not window.no_selection_label.isHidden()
        assert window.detail_widget.isHidden()

    def test_add_button_disabled_until_text(self, window):
        assert not window.add_link_btn.isEnabled()
        assert window.add_link_btn.toolTip() == "Type link before adding to list"

        window.link_input.setText("https://a.com")

        assert window.add_link_btn.isEnabled()
        assert window.add_link_btn.toolTip() == "Save link to link list"
        assert window.state.link_input == "https://a.com"

    def test_add_link_with_button(self, window):
        add_link(window, "https://a.com")

        assert window.state.registry.urls() == ["https://a.com"]
        assert window.link_list.count() == 1
        assert window.link_list.item(0).text() == "https://a.com"
        assert window.links_heading.text() == "<h3>Links (1):</h3>"
        assert window.link_input.text() == ""
        assert window.empty_hint_label.isHidden()

    def test_add_link_with_enter(self, window, qtbot):
        window.show()
        qtbot.waitExposed(window)
        qtbot.keyClicks(window.link_input, "https://a.com")
        qtbot.keyClick(window.link_input, Qt.Key.Key_Return)

        assert "https://a.com" in window.state.registry
        assert window.link_input.text() == ""

    def test_duplicate_link_reports_error(self, window):
        add_link(window, "https://a.com")
        add_link(window, "https://a.com")

        assert window.link_list.count() == 1
        assert window.link_input.text() == "https://a.com"
        assert "already" in window.status_bar.currentMessage()


class TestSelection:
    """Test selecting and acting on links."""

    def test_restored_selection_is_shown(self, populated_window):
        window = populated_window

        assert window.no_selection_label.isHidden()
        assert not window.detail_widget.isHidden()
        assert "https://b.com" in window.url_link_label.text()
        assert window.labels_label.text() == "No labels"
        assert window.link_list.item(1).foreground().color() == SELECTED_COLOR
        assert window.link_list.item(0).foreground().color() != SELECTED_COLOR

    def test_click_selects_link(self, populated_window):
        window = populated_window

        window.on_link_clicked(window.link_list.item(0))

        assert window.state.selected == "https://a.com"
        assert window.labels_label.text() == "Labels: news, tech"
        assert window.link_list.item(0).foreground().color() == SELECTED_COLOR

    def test_copy_puts_url_on_clipboard(self, populated_window):
        populated_window.copy_btn.click()

        assert QApplication.clipboard().text() == "https://b.com"

    def test_delete_clears_selection(self, populated_window):
        window = populated_window

        window.delete_btn.click()

        assert window.state.registry.get("https://b.com") is None
        assert window.state.selected is None
        assert window.link_list.count() == 2
        assert not window.no_selection_label.isHidden()
        assert window.detail_widget.isHidden()

    def test_edit_shows_label_entry(self, populated_window):
        window = populated_window
        assert window.label_entry_widget.isHidden()

        window.edit_btn.click()

        assert not window.label_entry_widget.isHidden()
        assert window.edit_btn.isChecked()

    def test_add_label(self, populated_window):
        window = populated_window
        window.edit_btn.click()

        window.label_input.setText("docs")
        window.add_label_btn.click()

        assert window.state.registry.get("https://b.com").labels == ["docs"]
        assert window.labels_label.text() == "Labels: docs"
        assert window.label_input.text() == ""

    def test_duplicate_label_keeps_single_entry(self, populated_window):
        window = populated_window
        window.on_link_clicked(window.link_list.item(0))
        window.edit_btn.click()

        window.label_input.setText("news")
        window.on_label_submitted()

        assert window.state.registry.get("https://a.com").labels == ["news", "tech"]
        assert "already" in window.status_bar.currentMessage()


class TestPersistence:
    """Test saving on close and snapshot files."""

    def test_close_saves_state(self, window, storage):
        window.show()
        add_link(window, "https://a.com")

        window.close()

        assert storage.get_value(APP_KEY)["links"] == {
            "https://a.com": {"url": "https://a.com", "labels": []}
        }

    def test_save_and_load_snapshot(self, populated_window, tmp_path):
        window = populated_window
        path = tmp_path / "links.json"
        assert window.save_snapshot(path)
        window.delete_btn.click()
        assert window.link_list.count() == 2

        assert window.load_snapshot(path)

        assert window.state.registry.urls() == ["https://a.com", "https://b.com", "https://c.com"]
        assert window.state.selected == "https://b.com"
        assert window.link_list.count() == 3

    def test_load_bad_snapshot_keeps_state(self, populated_window, tmp_path, monkeypatch):
        warnings = []
        monkeypatch.setattr(QMessageBox, "warning", lambda *args: warnings.append(args))
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        assert not populated_window.load_snapshot(path)

        assert len(warnings) == 1
        assert len(populated_window.state.registry) == 3

    def test_load_binary_snapshot_keeps_state(self, populated_window, tmp_path, monkeypatch):
        warnings = []
        monkeypatch.setattr(QMessageBox, "warning", lambda *args: warnings.append(args))
        path = tmp_path / "binary.json"
        path.write_bytes(b"\xff\xfe\x00garbage")
        before = populated_window.state.to_snapshot()

        assert not populated_window.load_snapshot(path)

        assert len(warnings) == 1
        assert populated_window.state.to_snapshot() == before
        assert populated_window.link_list.count() == 3

    def test_window_starts_with_mistyped_saved_labels(self, qtbot, state_service, storage):
        storage.set_value(APP_KEY, {
            "links": {"https://a.com": {"url": "https://a.com", "labels": 5}},
            "selected": "https://a.com",
        })

        window = MainWindow(state_service)
        qtbot.addWidget(window)

        assert window.link_list.count() == 1
        assert window.labels_label.text() == "No labels"

    def test_failed_save_on_close_is_logged(self, window, monkeypatch, caplog):
        def fail_save(state):
            raise sqlite3.OperationalError("disk I/O error")

        monkeypatch.setattr(window.state_service, "save_state", fail_save)
        window.show()

        with caplog.at_level(logging.ERROR, logger="linkser.ui.main_window"):
            window.close()

        records = [r for r in caplog.records if r.name == "linkser.ui.main_window"]
        assert len(records) == 1
        assert records[0].exc_info is not None
        assert "disk I/O error" in caplog.text
