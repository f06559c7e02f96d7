# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Base reporting classes.

Reports wrap a finished analysis result and lay it out as a pandas
DataFrame. They only format and arrange numbers; every figure comes from
the result object.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Tuple, Type


class BaseReport(ABC):
    """
    Abstract base class for tabular reports.

    Subclasses declare the result type(s) they accept in ``result_types``
    and implement ``generate``.
    """

    result_types: ClassVar[Tuple[Type, ...]] = ()

    def __init__(self, result: Any):
        """
        Initialize report with an analysis result.

        Args:
            result: Result object of one of ``result_types``
        """
        if self.result_types and not isinstance(result, self.result_types):
            expected = ", ".join(t.__name__ for t in self.result_types)
            raise TypeError(
                f"{type(self).__name__} requires {expected}, got {type(result).__name__}"
            )
        self._result = result

    @abstractmethod
    def generate(self, **kwargs) -> Any:
        """Produce the report table."""
        pass
