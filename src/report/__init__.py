"""
Report Generation

Human-readable reporting in multiple formats.
"""

from .resolution_report import (
    ResolutionReport,
    StageTiming
)

from .simple_report_generator import (
    SimpleReportGenerator,
    quick_report
)

__all__ = [
    'ResolutionReport',
    'StageTiming',
    'SimpleReportGenerator',
    'quick_report'
]
