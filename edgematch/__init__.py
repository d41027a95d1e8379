# Copyright (c) 2026 Harsh Dwivedi
# Licensed under the Harsh Non-Commercial Attribution License (HNCAL) v1.0
# Commercial use requires written permission. See LICENSE for details.

"""
EdgeMatch — ambiguous edge-matching tile puzzle generator.
"""

__version__ = "1.0.0"
