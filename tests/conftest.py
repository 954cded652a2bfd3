"""
Shared fixtures for Glyph Symbol Data Editor tests.

Provides sample SVG glyphs, glyph documents, and editor widget fixtures.
"""
import sys
import os
import pytest

# Ensure editor/src is on the path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'editor', 'src'))

# Widgets are created without a display
os.environ.setdefault('QT_QPA_PLATFORM', 'offscreen')


# ── Sample SVG glyphs ───────────────────────────────────────────────────

# 100x50 user units; stroke from (10,20) ending with a curve at (90,40)
SAMPLE_GLYPH = """\
<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="100" height="50" viewBox="0 0 100 50">
  <path d="M10,20 L30,40 C50,45 70,45 90,40" fill="none" stroke="black" stroke-width="2"/>
</svg>
"""

# Two strokes in a translated group; last stroke ends with a line
SAMPLE_TRANSLATED_GLYPH = """\
<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="200" height="100" viewBox="0 0 200 100">
  <g transform="translate(10, 5)">
    <path d="M20,10 c10,0 20,10 20,20" fill="none" stroke="black"/>
    <path d="m100,20 l30,40" fill="none" stroke="black"/>
  </g>
</svg>
"""

SAMPLE_NO_PATHS = """\
<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="100" height="50" viewBox="0 0 100 50">
  <rect x="0" y="0" width="100" height="50"/>
</svg>
"""

SAMPLE_DEGENERATE = """\
<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="0" height="50" viewBox="0 0 0 50">
  <path d="M0,0 L0,50" stroke="black"/>
</svg>
"""


@pytest.fixture
def glyph_svg():
    """Simple single-stroke glyph"""
    return SAMPLE_GLYPH


@pytest.fixture
def translated_glyph_svg():
    """Glyph with a translated group and two strokes"""
    return SAMPLE_TRANSLATED_GLYPH


@pytest.fixture
def no_paths_svg():
    """Valid SVG without any path element"""
    return SAMPLE_NO_PATHS


@pytest.fixture
def degenerate_svg():
    """SVG with zero width"""
    return SAMPLE_DEGENERATE


@pytest.fixture
def glyph_file(tmp_path, glyph_svg):
    """Simple glyph written to disk"""
    path = tmp_path / "a.svg"
    path.write_text(glyph_svg, encoding='utf-8')
    return path


@pytest.fixture
def glyph_document(glyph_svg):
    from models.glyph_document import GlyphDocument
    return GlyphDocument.from_string(glyph_svg, "a.svg")


@pytest.fixture
def editor(qtbot, tmp_path):
    """Shown editor without a glyph, using default settings"""
    from components.symbol_data_editor import SymbolDataEditor
    widget = SymbolDataEditor(config_file=str(tmp_path / "missing.json"))
    qtbot.addWidget(widget)
    widget.resize(600, 400)
    widget.show()
    qtbot.waitExposed(widget)
    return widget


@pytest.fixture
def loaded_editor(editor, glyph_document):
    """Editor with the simple glyph loaded and automatic points"""
    editor.load(glyph_document)
    return editor
