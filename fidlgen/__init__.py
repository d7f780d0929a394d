"""fidlgen C++ backend.

Turns a compiled FIDL library IR into the scaffolding of its generated C++
implementation file: license banner, generation warning, includes, and the
nested namespace blocks matching the library name.
"""

__version__ = "0.1.0"
