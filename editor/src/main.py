"""Glyph Symbol Data Editor - standalone window for one glyph.

Opens an SVG glyph in the symbol data editor. When the window is closed
the stored (normalized) symbol data is printed as JSON, ready for the
font project file.

Usage:
    python main.py <glyph.svg> [--mode in|out|limits|none]
                   [--in-point X,Y] [--out-point X,Y] [--limits L,T,R,B]
                   [--config FILE] [--verbose]
"""

import sys
import os
import json
import argparse
import logging

# Add editor/src to path so imports work when running directly
if __name__ == "__main__":
    current_dir = os.path.dirname(os.path.abspath(__file__))
    if current_dir not in sys.path:
        sys.path.insert(0, current_dir)

from PyQt5.QtWidgets import QApplication, QMainWindow

from components.symbol_data_editor import SymbolDataEditor
from models.errors import LoadError
from utils.logger import set_main_window, set_debug_mode


def _parse_numbers(text, count, name):
    try:
        values = [float(v) for v in text.split(',')]
    except ValueError:
        raise argparse.ArgumentTypeError(f"{name} must be {count} comma separated numbers")
    if len(values) != count:
        raise argparse.ArgumentTypeError(f"{name} must be {count} comma separated numbers")
    return tuple(values)


def _point(text):
    return _parse_numbers(text, 2, "Point")


def _rect(text):
    return _parse_numbers(text, 4, "Limits")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Edit the in point, out point and limits of a glyph.',
    )
    parser.add_argument('glyph', help='SVG glyph image.')
    parser.add_argument('--mode', choices=['in', 'out', 'limits', 'none'], default='in',
                        help='Item the pointer edits (default: in).')
    parser.add_argument('--in-point', type=_point, help='Stored in point "x,y".')
    parser.add_argument('--out-point', type=_point, help='Stored out point "x,y".')
    parser.add_argument('--limits', type=_rect, help='Stored limits "left,top,right,bottom".')
    parser.add_argument('--config', help='JSON settings file.')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Enable verbose logging.')
    args = parser.parse_args(argv)

    given = [args.in_point, args.out_point, args.limits]
    if any(v is not None for v in given) and not all(v is not None for v in given):
        parser.error('--in-point, --out-point and --limits must be given together')
    return args


def symbol_data_to_dict(editor):
    """Stored symbol data of the editor as plain lists."""
    in_point = editor.get_in_point()
    out_point = editor.get_out_point()
    limits = editor.get_limits()
    return {
        'in_point': list(in_point) if in_point else None,
        'out_point': list(out_point) if out_point else None,
        'limits': list(limits) if limits else None,
    }


class SymbolDataWindow(QMainWindow):
    """Main window hosting one symbol data editor"""

    def __init__(self, config_file=None):
        super().__init__()
        self.editor = SymbolDataEditor(self, config_file=config_file)
        self.setCentralWidget(self.editor)
        self.resize(800, 600)
        self.editor.symbolDataChanged.connect(self._on_symbol_data_changed)

    def _on_symbol_data_changed(self):
        self.statusBar().showMessage(json.dumps(symbol_data_to_dict(self.editor)))


def main(argv=None):
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    # Errors show a message box unless debugging
    set_debug_mode(args.verbose)

    app = QApplication(sys.argv[:1])
    try:
        window = SymbolDataWindow(args.config)
    except (ValueError, TypeError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    set_main_window(window)
    editor = window.editor

    if args.in_point is not None:
        editor.set_symbol_data(args.in_point, args.out_point, args.limits)
    try:
        editor.load(args.glyph)
    except LoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.mode == 'in':
        editor.enable_in_point_changes()
    elif args.mode == 'out':
        editor.enable_out_point_changes()
    elif args.mode == 'limits':
        editor.enable_limits_changes()
    else:
        editor.disable_changes()

    window.setWindowTitle(f"Symbol Data - {os.path.basename(args.glyph)}")
    window.show()
    code = app.exec_()

    print(json.dumps(symbol_data_to_dict(editor), indent=2))
    return code


if __name__ == "__main__":
    sys.exit(main())
