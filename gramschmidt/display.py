# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Text formatting for vectors, bases and verification results
"""

from typing import List, Sequence

from .vector import Vector


def format_vector(v: Vector, precision: int = 4) -> str:
    return "(" + ", ".join(f"{c:.{precision}f}" for c in v) + ")"


def format_basis(basis: Sequence[Vector], prefix: str, precision: int = 4) -> List[str]:
    """One line per vector, numbered from 1: `w2 = (0.0000, 1.0000)`."""
    return [
        f"{prefix}{i} = {format_vector(v, precision)}"
        for i, v in enumerate(basis, start=1)
    ]


def format_verification(question: str, ok: bool) -> str:
    return f"Verification: Is {question}? " + ("YES ✓" if ok else "NO ✗")


def banner(char: str = "=", width: int = 60) -> str:
    return char * width
