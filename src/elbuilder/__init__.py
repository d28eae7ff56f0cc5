from __future__ import annotations

"""
elbuilder: static-site assembler for <el-component> and <el-layout> pages.
"""

__version__ = "0.1.0"
