"""
Slack Event and Interaction Handlers

Handles Slack interactions:
- Month selection modal creation and submission parsing
"""

from .modal_handler import SlackModalHandler

__all__ = ['SlackModalHandler']
