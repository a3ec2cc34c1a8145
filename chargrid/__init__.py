#
# PROJECT: chargrid
# MODULE: chargrid/__init__.py
# STATUS: Level 2 - Implementation
# LOG_REF: 2026-10-18
#

from .errors import GridError, InvalidDimension, InvalidFillCharacter, StorageExhausted, TruncatedRecord
from .rasterizer import classify, plot_path, DRAWING_GLYPHS
from .storage import HeapStorage, BoundedStorage, make_storage
from .canvas import CharGrid, Ordering
from .validation import validate_attributes, validate_coords, validate_line_count
from .record import dump, dumps, load, loads
from .renderer import Renderer
from .config import GridConfig
from .session import DrawingSession
