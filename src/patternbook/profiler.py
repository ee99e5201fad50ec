# src/patternbook/profiler.py
"""
Time and memory profiling of demo runs.
"""

import threading
import time
from contextlib import contextmanager
from typing import Dict, Iterator

import psutil

from .config import CatalogConfig


class DemoProfiler:
    """Per-demo wall time and resident memory statistics."""

    def __init__(self, config: CatalogConfig):
        self.config = config
        self.demo_stats = {}
        self.peak_memory = 0.0
        self.profile_count = 0
        self._process = psutil.Process()
        self._lock = threading.Lock()

    def profile_memory(self) -> Dict[str, float]:
        """Current process memory usage in MB."""
        info = self._process.memory_info()
        vm = psutil.virtual_memory()
        return {
            'rss': info.rss / 1024**2,
            'vms': info.vms / 1024**2,
            'available': vm.available / 1024**2,
            'total': vm.total / 1024**2
        }

    def update_stats(self, demo_name: str, elapsed: float, memory_delta: float):
        """Update statistics for a demo."""
        with self._lock:
            if demo_name not in self.demo_stats:
                self.demo_stats[demo_name] = {
                    'count': 0,
                    'total_time': 0.0,
                    'total_memory': 0.0,
                    'peak_memory': 0.0
                }

            stats = self.demo_stats[demo_name]
            stats['count'] += 1
            stats['total_time'] += elapsed
            stats['total_memory'] += memory_delta
            stats['peak_memory'] = max(stats['peak_memory'], memory_delta)

            self.peak_memory = max(self.peak_memory, memory_delta)
            self.profile_count += 1

    @contextmanager
    def measure(self, demo_name: str) -> Iterator[None]:
        """Record time and RSS growth of the enclosed block under ``demo_name``."""
        before = self.profile_memory()['rss']
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed = time.perf_counter() - start
            after = self.profile_memory()['rss']
            self.update_stats(demo_name, elapsed, after - before)

    def summary(self) -> str:
        """Table of the collected statistics, one line per demo."""
        lines = [f"{'demo':<26}{'runs':>6}{'time (ms)':>12}{'mem (MB)':>12}"]
        with self._lock:
            for name, stats in self.demo_stats.items():
                lines.append(
                    f"{name:<26}{stats['count']:>6}"
                    f"{stats['total_time'] * 1000:>12.2f}{stats['total_memory']:>12.2f}"
                )
        return "\n".join(lines)
