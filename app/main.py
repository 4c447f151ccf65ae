"""
Circuit Sketch - compose schematics on a grid and export CircuiTikZ markup.

Usage::

    python main.py
    python main.py --debug
"""

import argparse
import logging
import sys


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Schematic editor with CircuiTikZ export")
    parser.add_argument("--debug", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    from GUI.main_window import MainWindow
    from PyQt6.QtWidgets import QApplication

    app = QApplication(sys.argv[:1])
    window = MainWindow()
    window.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
