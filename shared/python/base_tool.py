"""
Geographic Converter — Shared Base Tool
========================================
Abstract base class for file-driven tools built on the converter.

Design Pattern:
    Template Method — the public ``run()`` method defines a fixed
    pipeline (validate → process → report) that subclasses fill in
    by implementing ``validate_inputs`` and ``process``.

Usage::

    from shared.python.base_tool import GeoTool

    class MyTool(GeoTool):
        def validate_inputs(self) -> None:
            ...
        def process(self) -> None:
            ...
"""

from __future__ import annotations

import logging
import time
from abc import ABC, abstractmethod
from pathlib import Path

# ---------------------------------------------------------------------------
# Parent logger — modules use child loggers named "geoconverter.<module>".
# ---------------------------------------------------------------------------
logger = logging.getLogger("geoconverter")


class GeoTool(ABC):
    """Abstract base class for file-driven geographic tools.

    Attributes:
        input_path: Path to the primary input file.
        output_path: Path where output will be written.
        verbose: When ``True`` the tool logs DEBUG-level messages in
            addition to INFO/WARNING/ERROR.

    Example::

        tool = BatchGeographicConverter(
            input_path=Path("points.csv"),
            output_path=Path("points_local.csv"),
            config=BatchConverterConfig(direction="to_planar"),
        )
        tool.run()
    """

    def __init__(
        self,
        input_path: Path,
        output_path: Path,
        *,
        verbose: bool = False,
    ) -> None:
        self.input_path: Path = Path(input_path)
        self.output_path: Path = Path(output_path)
        self.verbose: bool = verbose

        self._configure_logging()

    # ------------------------------------------------------------------
    # Abstract interface
    # ------------------------------------------------------------------

    @abstractmethod
    def validate_inputs(self) -> None:
        """Validate all inputs before processing begins.

        Raises:
            InputValidationError: If a required file is missing, a
                column does not exist, or an origin is out of range.
        """

    @abstractmethod
    def process(self) -> None:
        """Execute the core processing logic.

        Called by :meth:`run` after :meth:`validate_inputs` has succeeded.
        """

    # ------------------------------------------------------------------
    # Template method
    # ------------------------------------------------------------------

    def run(self) -> None:
        """Execute validate → process → report.

        Any exception raised by ``validate_inputs`` or ``process``
        propagates unchanged so callers can handle it.
        """
        logger.info("Starting %s", self.__class__.__name__)
        start = time.perf_counter()

        self.validate_inputs()
        self.process()

        elapsed = time.perf_counter() - start
        self._report_success(elapsed)

    # ------------------------------------------------------------------
    # Protected helpers
    # ------------------------------------------------------------------

    def _report_success(self, elapsed: float) -> None:
        logger.info(
            "%s completed in %.2fs → %s",
            self.__class__.__name__,
            elapsed,
            self.output_path,
        )

    def _configure_logging(self) -> None:
        """Attach a console handler to the ``geoconverter`` logger once.

        Uses DEBUG level when ``self.verbose`` is ``True``, otherwise INFO.
        """
        configure_logging(verbose=self.verbose)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"input_path={self.input_path!r}, "
            f"output_path={self.output_path!r})"
        )


def configure_logging(*, verbose: bool = False) -> logging.Logger:
    """Set up console logging on the ``geoconverter`` parent logger.

    Safe to call repeatedly; a handler is attached only if none exists.

    Args:
        verbose: DEBUG level when ``True``, INFO otherwise.

    Returns:
        The configured parent logger.
    """
    if not logger.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            fmt="[%(asctime)s] %(levelname)-8s %(name)s — %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    return logger
