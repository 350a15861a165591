"""Hojas de estilo QSS compartidas por las pantallas."""

from __future__ import annotations

PAGE_STYLES = """
QWidget#page {
    background-color: #f5f5f5;
}
QFrame#card {
    background-color: #ffffff;
    border-radius: 16px;
}
QLabel#pageTitle {
    color: #8B4513;
    font-family: "Georgia";
    font-size: 22px;
    font-weight: 700;
}
QLabel#fieldLabel {
    color: #5a3a1a;
    font-family: "Segoe UI";
    font-size: 13px;
    font-weight: 600;
}
QLabel#errorLabel {
    color: #b91c1c;
    font-family: "Segoe UI";
    font-size: 12px;
    font-weight: 600;
}
QLabel#emptyLabel {
    color: #7f7f7f;
    font-family: "Segoe UI";
    font-size: 14px;
}
QLineEdit, QComboBox, QTextEdit {
    background-color: #fffaf3;
    border: 1px solid #d4a373;
    border-radius: 8px;
    color: #111827;
    font-family: "Segoe UI";
    font-size: 13px;
    padding: 8px;
}
QLineEdit:focus, QComboBox:focus, QTextEdit:focus {
    border: 1px solid #8B4513;
    background-color: #ffffff;
}
QListWidget {
    background-color: #ffffff;
    border: 1px solid #e5d3bd;
    border-radius: 10px;
    font-family: "Segoe UI";
    font-size: 13px;
}
QListWidget::item {
    border-bottom: 1px solid #f0e4d4;
    padding: 8px;
}
QListWidget::item:selected {
    background-color: #f4e1c9;
    color: #3b2410;
}
QPushButton {
    background-color: #8B4513;
    border: none;
    border-radius: 10px;
    color: #ffffff;
    font-family: "Georgia";
    font-size: 13px;
    font-weight: 700;
    min-height: 38px;
    padding: 6px 14px;
}
QPushButton:hover {
    background-color: #A0522D;
}
QPushButton:pressed {
    background-color: #6b4226;
}
QPushButton:disabled {
    background-color: #d2b48c;
    color: #f5efe6;
}
QPushButton#secondaryButton {
    background-color: #e5e7eb;
    color: #1f2937;
}
QPushButton#secondaryButton:hover {
    background-color: #d1d5db;
}
QPushButton#dangerButton {
    background-color: #8B0000;
}
QPushButton#dangerButton:hover {
    background-color: #a31515;
}
"""
