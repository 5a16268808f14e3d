"""Analysis-related exceptions: malformed input records, unknown modules."""

from typing import Dict, List, Optional

from .base import DependencyMapperError


class AnalysisError(DependencyMapperError):
    """Base class for analysis-related errors."""
    pass


class DataIntegrityError(AnalysisError):
    """Raised when a type-count record is structurally invalid.

    Fatal to the whole run: no partial graph is returned.
    """

    def __init__(self, module: str, reason: str, total_types: Optional[int] = None,
                 abstract_types: Optional[int] = None):
        details: Dict[str, str] = {"module": module, "reason": reason}
        if total_types is not None:
            details["total_types"] = str(total_types)
        if abstract_types is not None:
            details["abstract_types"] = str(abstract_types)

        super().__init__(f"Invalid type counts for module: {module}", details=details)
        self.module = module
        self.reason = reason
        self.total_types = total_types
        self.abstract_types = abstract_types


class UnknownModuleError(AnalysisError):
    """Raised when a caller refers to a module the graph does not contain."""

    def __init__(self, module: str, known_modules: Optional[List[str]] = None):
        details: Dict[str, str] = {"module": module}
        if known_modules is not None:
            details["known"] = str(len(known_modules))

        super().__init__(f"Unknown module: {module}", details=details)
        self.module = module
        self.known_modules = known_modules or []
