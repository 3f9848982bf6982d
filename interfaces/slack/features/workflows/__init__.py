"""
Workflow Integration

Workflows run by the Slack app:
- Days workflow: month selection form, one message per date, confirmation
"""

from .days_function import DaysFunction, DaysFunctionResult
from .days_workflow import DaysWorkflow

__all__ = ['DaysFunction', 'DaysFunctionResult', 'DaysWorkflow']
