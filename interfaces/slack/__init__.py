"""
Slack Integration Module

Slack app for posting the dates of a month:
- Message shortcut and /days slash command triggers
- Month selection modal
- Ordered, paced posting of one message per date
"""

from .core_slack_orchestration import SlackInterface, create_slack_app

__all__ = ['SlackInterface', 'create_slack_app']
