#!/usr/bin/env python3

"""Progress tracking for header parsing passes."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from time import time


class ProgressTracker:
    """
    Track and report parsing progress across the frontend passes.

    Times each pass, counts AST nodes visited and declarations emitted, and
    reports a one-line summary at the end of a parse.
    """

    def __init__(self, logger: logging.Logger, slow_pass_ms: int | None = None):
        """
        Initialize progress tracker.

        Args:
            logger: Logger instance for progress reporting
            slow_pass_ms: Passes slower than this are reported at INFO level
        """
        self.logger = logger
        self.slow_pass_ms = slow_pass_ms
        self.start_time = time()
        self.pass_count = 0
        self.node_count = 0
        self.declaration_count = 0
        self.operation_stack: list[tuple[str, float]] = []

    @contextmanager
    def track_operation(self, operation_name: str) -> Iterator[None]:
        """
        Track a high-level operation (a frontend pass) with timing.

        Args:
            operation_name: Name of the operation being tracked

        Yields:
            None
        """
        start_time = time()
        self.operation_stack.append((operation_name, start_time))
        self.pass_count += 1

        self.logger.debug(f"Starting operation: {operation_name}")

        try:
            yield
            elapsed = time() - start_time
            if self.slow_pass_ms is not None and elapsed * 1000 >= self.slow_pass_ms:
                self.logger.info(
                    f"Slow operation: {self.get_current_context()} took {elapsed:.3f}s"
                )
            else:
                self.logger.debug(f"Completed operation: {operation_name} in {elapsed:.3f}s")
        except Exception as e:
            elapsed = time() - start_time
            self.logger.error(
                f"Failed operation: {self.get_current_context()} after {elapsed:.3f}s: {e}"
            )
            raise
        finally:
            self.operation_stack.pop()

    def count_nodes(self, count: int) -> None:
        """Add visited AST nodes to the statistics."""
        self.node_count += count

    def count_declarations(self, count: int) -> None:
        """Add emitted declarations to the statistics."""
        self.declaration_count += count

    def report_summary(self) -> None:
        """Report final processing statistics."""
        total_time = time() - self.start_time
        node_rate = self.node_count / total_time if total_time > 0 else 0

        self.logger.info(
            f"Processing complete: {self.pass_count} passes, {self.node_count} AST nodes, "
            f"{self.declaration_count} declarations in {total_time:.2f}s "
            f"({node_rate:.1f} nodes/s)"
        )

    def get_current_context(self) -> str:
        """
        Get current operation context for logging.

        Returns:
            String describing current operation stack
        """
        if not self.operation_stack:
            return "idle"

        return " → ".join(op[0] for op in self.operation_stack)

