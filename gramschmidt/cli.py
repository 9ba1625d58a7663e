#!/usr/bin/python3
# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Interactive console for the Gram-Schmidt process.

    gram-schmidt                       # prompt for everything
    gram-schmidt -d 2 -v 1,0 -v 1,1    # non-interactive
    gram-schmidt -v 1,2 --vector=-2,1  # a leading minus needs the = form
"""

import argparse
import logging
import sys
from typing import Callable, List, Optional, TextIO

from .display import banner, format_basis, format_verification
from .errors import GramSchmidtError
from .orthogonalization import (
    are_linearly_independent,
    check_basis,
    is_orthogonal,
    is_orthonormal,
    orthogonalize,
    orthonormalize,
)
from .vector import Vector

logger = logging.getLogger(__name__)

MIN_DIMENSION = 2
MAX_DIMENSION = 10


def _parse_dimension(text: str) -> int:
    try:
        dimension = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if not MIN_DIMENSION <= dimension <= MAX_DIMENSION:
        raise argparse.ArgumentTypeError(
            f"dimension must be between {MIN_DIMENSION} and {MAX_DIMENSION}"
        )
    return dimension


def _parse_precision(text: str) -> int:
    try:
        precision = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}")
    if precision < 0:
        raise argparse.ArgumentTypeError("precision must not be negative")
    return precision


def _parse_vector(text: str) -> Vector:
    try:
        return Vector([float(c) for c in text.split(",")])
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a comma separated list of numbers: {text!r}")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="gram-schmidt",
        description="Orthogonalize and orthonormalize a basis with Gram-Schmidt.",
    )
    p.add_argument(
        "-d",
        "--dimension",
        type=_parse_dimension,
        help=f"dimension of the space ({MIN_DIMENSION}-{MAX_DIMENSION})",
    )
    p.add_argument(
        "-v",
        "--vector",
        dest="vectors",
        action="append",
        type=_parse_vector,
        default=[],
        metavar="C1,C2,...",
        help="a basis vector; repeat once per vector (write --vector=-1,2 "
        "when the first component is negative)",
    )
    p.add_argument(
        "--precision", type=_parse_precision, default=4, help="decimals to print"
    )
    p.add_argument("--verbose", action="store_true", help="enable debug logging")
    return p


def prompt_dimension(input_fn: Callable[[str], str], out: TextIO) -> int:
    while True:
        text = input_fn(f"Enter the dimension of the space ({MIN_DIMENSION}-{MAX_DIMENSION}): ")
        try:
            dimension = int(text.strip())
        except ValueError:
            print("Invalid input. Please enter an integer.", file=out)
            continue
        if MIN_DIMENSION <= dimension <= MAX_DIMENSION:
            return dimension
        print(
            f"Please enter a number between {MIN_DIMENSION} and {MAX_DIMENSION}.",
            file=out,
        )


def prompt_vectors(
    dimension: int, input_fn: Callable[[str], str], out: TextIO
) -> List[Vector]:
    basis = []
    print(f"Enter {dimension} vectors for R^{dimension}:", file=out)
    print(file=out)
    for i in range(dimension):
        print(f"Vector {i + 1}:", file=out)
        components = []
        for j in range(dimension):
            while True:
                text = input_fn(f"  Component {j + 1}: ")
                try:
                    components.append(float(text.strip()))
                    break
                except ValueError:
                    print("  Invalid input. Please enter a number.", file=out)
        basis.append(Vector(components))
        print(file=out)
    return basis


def run(basis: List[Vector], precision: int = 4, out: TextIO = sys.stdout) -> int:
    """Print the original, orthogonal and orthonormal bases. Returns an exit status."""
    if not are_linearly_independent(basis):
        print("ERROR: The vectors are linearly dependent!", file=out)
        print("Please provide linearly independent vectors.", file=out)
        return 1

    sections = [
        ("ORIGINAL BASIS:", "v", basis, None),
        ("ORTHOGONAL BASIS:", "w", orthogonalize(basis), ("orthogonal", is_orthogonal)),
        (
            "ORTHONORMAL BASIS:",
            "u",
            orthonormalize(basis),
            ("orthonormal", is_orthonormal),
        ),
    ]
    for title, prefix, vectors, check in sections:
        print(banner("-"), file=out)
        print(title, file=out)
        print(banner("-"), file=out)
        for line in format_basis(vectors, prefix, precision):
            print(line, file=out)
        if check is not None:
            question, predicate = check
            print(format_verification(question, predicate(vectors)), file=out)
        print(file=out)

    print(banner(), file=out)
    print("Process completed successfully!", file=out)
    print(banner(), file=out)
    return 0


def main(
    argv: Optional[List[str]] = None,
    input_fn: Callable[[str], str] = input,
    stdout: TextIO = sys.stdout,
    stderr: TextIO = sys.stderr,
) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.vectors and args.dimension is None:
        args.dimension = args.vectors[0].dimension
        if not MIN_DIMENSION <= args.dimension <= MAX_DIMENSION:
            parser.error(
                f"dimension must be between {MIN_DIMENSION} and {MAX_DIMENSION}"
            )

    print(banner(), file=stdout)
    print("GRAM-SCHMIDT ORTHONORMALIZATION PROCESS", file=stdout)
    print(banner(), file=stdout)
    print(file=stdout)

    dimension = args.dimension
    if dimension is None:
        dimension = prompt_dimension(input_fn, stdout)
        print(file=stdout)

    if args.vectors:
        basis = args.vectors
        if len(basis) != dimension or any(v.dimension != dimension for v in basis):
            parser.error(f"expected {dimension} vectors with {dimension} components each")
    else:
        basis = prompt_vectors(dimension, input_fn, stdout)

    logger.debug("running Gram-Schmidt on %d vectors in R^%d", len(basis), dimension)
    try:
        check_basis(basis)
        return run(basis, args.precision, stdout)
    except GramSchmidtError as exc:
        print(f"error: {exc}", file=stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
