"""Layout engines registry.

Available engines:
- pedigree: generation rows with spouse/family grouping and child centering
"""

from famchart.exceptions import InvalidArgumentError
from famchart.layout.engines.base import LayoutEngine
from famchart.layout.engines.pedigree import PedigreeLayoutEngine

# Engine registry
ENGINES = {
    "pedigree": PedigreeLayoutEngine,
}


def get_engine(name: str) -> type:
    """Get layout engine class by name.

    Args:
        name: Engine name ('pedigree')

    Returns:
        Layout engine class

    Raises:
        InvalidArgumentError: If engine not found
    """
    if name not in ENGINES:
        raise InvalidArgumentError(
            f"Unknown layout engine: {name}. Available: {list(ENGINES.keys())}"
        )
    return ENGINES[name]


__all__ = [
    "LayoutEngine",
    "PedigreeLayoutEngine",
    "ENGINES",
    "get_engine",
]
