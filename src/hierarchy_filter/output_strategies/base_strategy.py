"""Output strategy base class defining the interface for hierarchy rendering.

This module provides the abstract base class that concrete strategies implement to
turn a hierarchy into text for the command line or for files.
"""

from abc import ABC, abstractmethod

from hierarchy_filter.hierarchy.base_hierarchy import Hierarchy


class OutputStrategy(ABC):
    """Abstract base class defining the interface for hierarchy output formatting strategies.

    This class implements the Strategy pattern for rendering a hierarchy in different
    formats (e.g., flat notation, tree drawing, JSON).

    Example:
        >>> class IdsOnlyStrategy(OutputStrategy):
        ...     def format(self, hierarchy: Hierarchy) -> str:
        ...         return " ".join(str(node_id) for node_id, _ in hierarchy)
        ...
        ...     def get_file_extension(self) -> str:
        ...         return ".ids"
        >>> from hierarchy_filter.hierarchy.array_hierarchy import ArrayBasedHierarchy
        >>> IdsOnlyStrategy().format(ArrayBasedHierarchy([1, 2], [0, 1]))
        '1 2'
    """

    @abstractmethod
    def format(self, hierarchy: Hierarchy) -> str:
        """Render a hierarchy.

        Args:
            hierarchy: The hierarchy to render.

        Returns:
            The rendered text, without a trailing newline.

        Raises:
            MalformedHierarchyError: If the format needs a well-formed hierarchy and
                the input is not one.
        """
        pass

    @abstractmethod
    def get_file_extension(self) -> str:
        """Get the appropriate file extension for this output format.

        Returns:
            The file extension including the leading dot (e.g., ".txt", ".json").
        """
        pass
