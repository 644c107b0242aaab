"""
Monitoring infrastructure.
"""

from stakeops.infrastructure.monitoring.system_reporter import SystemReporter

__all__ = ["SystemReporter"]
