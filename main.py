"""
Demonstration: build a relation, inspect its properties, print its closures.

    python main.py --size 4 --debug
"""

import argparse
import logging

from rich.console import Console

from constants import DEBUG, LOG_FORMAT
from relations import FiniteSet, Relation, rel_compo, strong_components
from utils.display import display_relation, display_set

logging.basicConfig(
    level=logging.DEBUG if DEBUG else logging.INFO,
    format=LOG_FORMAT,
)
logger = logging.getLogger(__name__)


def chain(size: int) -> Relation[int]:
    """The successor relation 0 -> 1 -> ... -> size - 1, plus a stray link."""
    relation = Relation(FiniteSet(range(size)))
    relation.add_links((i, i + 1) for i in range(size - 1))
    # Rejected: endpoint outside the carrier
    relation.add_link((size - 1, size))
    return relation


def main(size: int = 4, fixed_point: bool = True):
    console = Console()
    relation = chain(size)

    display_relation(relation, title="Relation", console=console)
    logger.info(f"Domain: {relation.domain()}, codomain: {relation.codomain()}")
    logger.info(
        f"Reflexive: {relation.is_reflexive()}, "
        f"symmetric: {relation.is_symmetric()}, "
        f"transitive: {relation.is_transitive()}"
    )

    display_relation(relation.refl_closure(), "Reflexive closure", console)
    display_relation(relation.sym_closure(), "Symmetric closure", console)
    closure = relation.trans_closure(fixed_point=fixed_point)
    display_relation(closure, "Transitive closure", console)
    display_relation(rel_compo(relation, relation), "Composed with itself", console)

    console.print("Strong components of the symmetric closure:")
    for component in strong_components(relation.sym_closure()):
        display_set(component, console)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Relation algebra demo")
    parser.add_argument("--size", type=int, default=4, help="Carrier size")
    parser.add_argument(
        "--single-sweep",
        action="store_true",
        help="Run one transitive closure sweep instead of iterating",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")

    args = parser.parse_args()

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    main(size=args.size, fixed_point=not args.single_sweep)
