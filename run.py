"""Postman Clone — Entry Point."""
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

from PyQt5.QtWidgets import QApplication
from core.logger import setup_logging
from gui.main_window import MainWindow


def main():
    setup_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("Postman Clone")
    window = MainWindow()
    window.show()
    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
