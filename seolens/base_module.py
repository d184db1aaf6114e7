# seolens/base_module.py
import logging
from abc import ABC, abstractmethod

from .document import HtmlDocument
from .models import CategoryResult, Finding

logger = logging.getLogger(__name__)


class SEOModule(ABC):
    """
    Abstract base class for all SEO analysis modules.
    Each module reads its own section of the configuration and implements
    its own 'analyze' method.
    """

    def __init__(self, config=None):
        self.module_name = self.__class__.__name__
        self.config = config if config else {}

    @abstractmethod
    def analyze(self, *args, **kwargs):
        pass


class CategoryAnalyzer(SEOModule):
    """
    Base class for the category analyzers.

    A subclass declares its fixed catalog of check names in `check_names`
    (in evaluation order) and implements `run_checks`, which must return
    exactly one Finding per catalog name, in that order.
    """

    check_names: tuple = ()

    @abstractmethod
    def run_checks(self, document: HtmlDocument) -> list[Finding]:
        """
        Evaluates every check of this category against the document.

        Args:
            document (HtmlDocument): The parsed page.

        Returns:
            list[Finding]: One finding per entry of `check_names`.
        """

    def analyze(self, document: HtmlDocument) -> CategoryResult:
        from .scoring.util import score_category  # scoring depends on this module

        items = self.run_checks(document)
        names = [item.name for item in items]
        if names != list(self.check_names):
            raise ValueError(f"{self.module_name} produced findings {names}, expected {list(self.check_names)}")
        result = CategoryResult(score=score_category(items), items=tuple(items))
        logger.debug("%s scored %d for %s", self.module_name, result.score, document.url)
        return result
