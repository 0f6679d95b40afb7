"""
selector-generator: Minimal unique CSS selectors for document elements.

Builds a pool of candidate selector fragments (own identity, exclusions,
descendant shape, sibling position, ancestors), each with a cost, and
reduces the pool to a small set that still matches exactly the targets.

Basic usage:
    from bs4 import BeautifulSoup
    from selector_generator import get_selector

    soup = BeautifulSoup(html, "lxml")
    selector = get_selector(soup.find("button", class_="primary"))

Several targets at once:
    selector = get_selector(soup.select("li.item"))

With options:
    from selector_generator import GeneratorOptions, OptimizerStrategy
    from selector_generator import SelectorGenerator, SoupDocumentService

    document = SoupDocumentService.from_html(html)
    options = GeneratorOptions(optimizer=OptimizerStrategy.BOTTOM_UP)
    generator = SelectorGenerator(document, options)
    selector = generator.get_selector(document.query_first("#app button"))
"""

__version__ = "0.1.0"
__license__ = "MIT"

from selector_generator.builders import SelectorBuilder
from selector_generator.config import (
    BlacklistOptions,
    ConfigurationError,
    CostOptions,
    GeneratorOptions,
    OptimizerStrategy,
    load_config,
)
from selector_generator.dom import DocumentService, ElementValidator, SoupDocumentService
from selector_generator.errors import (
    IncompatibleTargetsError,
    InvalidNodeKindError,
    SelectorGeneratorError,
)
from selector_generator.generator import SelectorGenerator, get_selector
from selector_generator.models import SelectorDescriptor, SelectorType
from selector_generator.optimizers import (
    BottomUpSelectorOptimizer,
    DebugOptimizer,
    TopDownSelectorOptimizer,
)

__all__ = [
    "__version__",
    # Entry points
    "get_selector",
    "SelectorGenerator",
    # Models
    "SelectorDescriptor",
    "SelectorType",
    "SelectorBuilder",
    # Documents
    "DocumentService",
    "SoupDocumentService",
    "ElementValidator",
    # Optimizers
    "TopDownSelectorOptimizer",
    "BottomUpSelectorOptimizer",
    "DebugOptimizer",
    # Configuration
    "GeneratorOptions",
    "CostOptions",
    "BlacklistOptions",
    "OptimizerStrategy",
    "load_config",
    "ConfigurationError",
    # Errors
    "SelectorGeneratorError",
    "InvalidNodeKindError",
    "IncompatibleTargetsError",
]
